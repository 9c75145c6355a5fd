import logging
from collections import namedtuple

from utils import Node, KIND_FILE, KIND_DIR, ROOT_NAME, SEPARATOR, is_valid_name
from errors import (
    InvalidNameError, AlreadyExistsError, NoSuchFileError,
    NoSuchDirectoryError, DirectoryNotEmptyError
)

# --- РЕЗУЛТАТИ ---
FileInfo = namedtuple("FileInfo", "name kind size created modified")
ListEntry = namedtuple("ListEntry", "name kind size")
Stats = namedtuple("Stats", "directories files total_size")
TreeEntry = namedtuple("TreeEntry", "depth name kind size path is_current modified")


class FileSystem:
    """Дърво от файлове и папки в паметта с текуща папка.

    Всички относителни операции се изпълняват спрямо current_dir. Триенето
    работи само върху деца на current_dir, затова текущата папка и
    родителите ѝ никога не могат да бъдат изтрити.
    """

    def __init__(self):
        self.root = Node(ROOT_NAME, KIND_DIR)
        self.current_dir = self.root

    # --- ПОМОЩНИ ---
    def _check_name(self, name):
        if not is_valid_name(name):
            raise InvalidNameError(name)

    def _find_file(self, name):
        self._check_name(name)
        node = self.current_dir.get_child(name)
        # Папка със същото име се брои за липсващ файл
        if node is None or node.is_dir:
            raise NoSuchFileError(name)
        return node

    def _create(self, name, kind, content=""):
        self._check_name(name)
        if self.current_dir.has_child(name):
            raise AlreadyExistsError(name)
        node = Node(name, kind, content)
        self.current_dir.add_child(node)
        logging.info(f"Създаден {kind}: {self.get_path(node)}")
        return node

    def get_path(self, node):
        parts = []
        while node is not self.root:
            parts.append(node.name)
            node = node.parent
        return SEPARATOR + SEPARATOR.join(reversed(parts))

    # --- СЪЗДАВАНЕ ---
    def create_file(self, name, content=""):
        self._create(name, KIND_FILE, content)

    def create_directory(self, name):
        self._create(name, KIND_DIR)

    # --- НАВИГАЦИЯ ---
    def change_directory(self, target):
        if target == "..":
            if self.current_dir is self.root:
                raise NoSuchDirectoryError(target, "Вече сте в корена")
            self.current_dir = self.current_dir.parent
        elif target == SEPARATOR:
            self.current_dir = self.root
        else:
            self._check_name(target)
            node = self.current_dir.get_child(target)
            if node is None or not node.is_dir:
                raise NoSuchDirectoryError(target)
            self.current_dir = node
        logging.debug(f"Текуща папка: {self.get_current_path()}")

    def get_current_path(self):
        return self.get_path(self.current_dir)

    # --- СЪДЪРЖАНИЕ ---
    def write_file(self, name, content):
        node = self._find_file(name)
        node.set_content(content)
        logging.info(f"Записани {len(content)} символа в {self.get_path(node)}")

    def read_file(self, name):
        return self._find_file(name).content

    def delete_entry(self, name):
        self._check_name(name)
        node = self.current_dir.get_child(name)
        if node is None:
            raise NoSuchFileError(name)
        if node.is_dir and node.children:
            raise DirectoryNotEmptyError(name)
        path = self.get_path(node)
        self.current_dir.remove_child(name).release()
        logging.info(f"Успешно изтрит: {path}")

    def file_info(self, name):
        self._check_name(name)
        node = self.current_dir.get_child(name)
        if node is None:
            raise NoSuchFileError(name)
        return FileInfo(node.name, node.kind, node.size, node.created, node.modified)

    def list_directory(self):
        return [
            ListEntry(child.name, child.kind, child.size if child.size else None)
            for child in self.current_dir.children
        ]

    # --- ОБХОЖДАНЕ НА ЦЯЛОТО ДЪРВО ---
    # Обхожданията са с явен стек, без рекурсия
    def search_file(self, query):
        results = []
        stack = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            if not node.is_dir:
                if query in node.name:
                    results.append(path)
                continue
            # Обратен ред в стека = ред на създаване при вадене
            for child in reversed(node.children):
                stack.append((child, path + SEPARATOR + child.name))
        return results

    def display_stats(self):
        dirs, files, total_size = 0, 0, 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_dir:
                dirs += 1
                stack.extend(node.children)
            else:
                files += 1
                total_size += node.size
        return Stats(dirs, files, total_size)

    def walk(self):
        entries = []
        stack = [(self.root, 0, "")]
        while stack:
            node, depth, path = stack.pop()
            entries.append(TreeEntry(
                depth, node.name, node.kind, node.size,
                path or SEPARATOR, node is self.current_dir, node.modified
            ))
            if node.is_dir:
                for child in reversed(node.children):
                    stack.append((child, depth + 1, path + SEPARATOR + child.name))
        return entries
