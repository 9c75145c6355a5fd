import logging
import re
import weakref
from datetime import datetime

# --- КОНСТАНТИ ---
SEPARATOR = "/"
ROOT_NAME = "root"
KIND_FILE = "file"
KIND_DIR = "dir"
LOG_FILE = "app.log"
MAX_UI_FILES = 1000


def configure_logging(filename=LOG_FILE, level=logging.INFO):
    # Всички интерфейси пишат в един и същи лог
    logging.basicConfig(
        filename=filename,
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


# --- СТРУКТУРИ ОТ ДАННИ ---
class Node:
    """Файл или папка в дървото.

    Папката притежава децата си: подреден списък (ред на създаване) и
    индекс име -> възел за проверка и търсене за O(1). Връзката към
    родителя е слаба (weakref), за да няма втори собственик.
    """

    def __init__(self, name, kind, content=""):
        self.name = name
        self.kind = kind
        self.content = content if kind == KIND_FILE else None
        self.created = datetime.now()
        self.modified = self.created
        self._parent = None
        self.children = [] if kind == KIND_DIR else None
        self._index = {} if kind == KIND_DIR else None

    @property
    def is_dir(self):
        return self.kind == KIND_DIR

    @property
    def parent(self):
        return self._parent() if self._parent is not None else None

    @property
    def size(self):
        return len(self.content) if self.kind == KIND_FILE else 0

    def set_content(self, content):
        self.content = content
        # Часовникът може да се върне назад - modified никога не пада под created
        self.modified = max(datetime.now(), self.created)

    # --- ИНДЕКС НА ДЕЦАТА ---
    def add_child(self, node):
        node._parent = weakref.ref(self)
        self.children.append(node)
        self._index[node.name] = node

    def remove_child(self, name):
        node = self._index.pop(name)
        self.children.remove(node)
        node._parent = None
        return node

    def get_child(self, name):
        return self._index.get(name)

    def has_child(self, name):
        return name in self._index

    def release(self):
        # Освобождаваме поддървото отдолу нагоре
        if self.children:
            for child in self.children:
                child.release()
            self.children.clear()
            self._index.clear()
        self._parent = None

    def __repr__(self):
        return f"Node({self.name!r}, {self.kind!r})"


# --- АЛГОРИТМИ ---
def is_valid_name(name):
    return bool(name) and SEPARATOR not in name

def natural_sort_key(s):
    # Разделя текст и числа за правилно сортиране (file2 преди file10)
    return [int(text) if text.isdigit() else text.lower() for text in re.split(r'(\d+)', s)]

def format_size(size_in_bytes):
    # Превръща байтовете в четим формат
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_in_bytes < 1024.0:
            return f"{size_in_bytes:.2f} {unit}"
        size_in_bytes /= 1024.0
    return f"{size_in_bytes:.2f} PB"
