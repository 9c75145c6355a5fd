# --- ГРЕШКИ НА ДЪРВОТО ---
# Всички грешки носят името на елемента, за да може интерфейсът да ги покаже директно.

class NamespaceError(Exception):
    def __init__(self, name, message):
        super().__init__(message)
        self.name = name


class InvalidNameError(NamespaceError, ValueError):
    def __init__(self, name):
        super().__init__(name, f"Невалидно име: '{name}'")


class AlreadyExistsError(NamespaceError):
    def __init__(self, name):
        super().__init__(name, f"'{name}' вече съществува")


class NotFoundError(NamespaceError, LookupError):
    pass


class NoSuchFileError(NotFoundError):
    def __init__(self, name):
        super().__init__(name, f"Файлът '{name}' не е намерен")


class NoSuchDirectoryError(NotFoundError):
    def __init__(self, name, message=None):
        super().__init__(name, message or f"Папката '{name}' не е намерена")


class DirectoryNotEmptyError(NamespaceError):
    def __init__(self, name):
        super().__init__(name, f"Папката '{name}' не е празна")
