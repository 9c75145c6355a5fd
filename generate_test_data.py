import random
import logging

from errors import AlreadyExistsError
from filesystem import FileSystem
from render import render_tree

# ==========================================
# НАСТРОЙКИ НА ГЕНЕРАТОРА
# ==========================================
NUM_MAIN_FOLDERS = 3               # Брой главни папки
MAX_DEPTH = 3                      # Колко нива навътре да влизат подпапките
FILES_PER_FOLDER = range(0, 6)     # Между 0 и 5 файла във всяка папка (ще генерира и празни папки!)
CONTENT_LINES = range(0, 4)        # Празни файлове също са валидни

EXTENSIONS = ['.txt', '.md', '.csv', '.log', '.json']
WORDS = ["отчет", "бележка", "план", "данни", "списък", "проект", "идея"]

def create_random_file(fs, rng):
    """Създава 1 файл с произволно име, разширение и текст в текущата папка"""
    ext = rng.choice(EXTENSIONS)
    file_name = f"mock_file_{rng.randint(1000, 9999)}{ext}"
    lines = [" ".join(rng.choices(WORDS, k=4)) for _ in range(rng.choice(CONTENT_LINES))]
    content = "".join(line + "\n" for line in lines)
    try:
        fs.create_file(file_name, content)
    except AlreadyExistsError as e:
        # Повторено случайно име - просто го пропускаме
        logging.debug(f"Пропуснат файл: {e}")

def build_tree(fs, folder_name, current_depth, rng):
    """Рекурсивно строи папки и ги пълни с файлове"""
    fs.create_directory(folder_name)
    fs.change_directory(folder_name)

    for _ in range(rng.choice(FILES_PER_FOLDER)):
        create_random_file(fs, rng)

    # Решаваме дали да създадем подпапка (ако не сме стигнали дъното)
    if current_depth < MAX_DEPTH:
        for i in range(rng.randint(0, 2)):
            build_tree(fs, f"Subfolder_{current_depth}_{i}", current_depth + 1, rng)

    fs.change_directory("..")

def populate(fs, seed=None):
    """Пълни дървото с примерни данни в текущата папка и се връща там"""
    rng = random.Random(seed)
    index = 0
    for _ in range(NUM_MAIN_FOLDERS):
        # Повторно пълнене продължава от първия свободен номер
        while fs.current_dir.has_child(f"Project_Folder_{index}"):
            index += 1
        build_tree(fs, f"Project_Folder_{index}", 1, rng)
        index += 1
    logging.info(f"Генерирани примерни данни в {fs.get_current_path()}")
    return fs

if __name__ == "__main__":
    print("🚀 Генериране на примерно дърво...")
    print(render_tree(populate(FileSystem())))
    print("✅ Генерирането завърши успешно!")
