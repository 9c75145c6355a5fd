from filesystem import FileSystem
from generate_test_data import populate, MAX_DEPTH, NUM_MAIN_FOLDERS
from render import render_tree
from utils import KIND_DIR

def test_render_empty_tree():
    """Празно дърво - само коренът, който е текущ"""
    assert render_tree(FileSystem()) == "/  <- тук"

def test_render_nested_tree():
    """Проверява свързващите линии и маркера за текуща папка"""
    fs = FileSystem()
    fs.create_directory("docs")
    fs.create_file("readme.md", "x" * 2048)
    fs.change_directory("docs")
    fs.create_file("a.txt", "abc")
    fs.create_directory("old")

    expected = "\n".join([
        "/",
        "├── docs/  <- тук",
        "│   ├── a.txt (3.00 B)",
        "│   └── old/",
        "└── readme.md (2.00 KB)",
    ])
    assert render_tree(fs) == expected

def test_render_last_branch_has_blank_prefix():
    """Под последната папка няма вертикална линия"""
    fs = FileSystem()
    fs.create_directory("a")
    fs.change_directory("a")
    fs.create_directory("b")
    fs.change_directory("b")
    fs.create_file("c.txt")
    fs.change_directory("/")

    assert render_tree(fs).splitlines() == [
        "/  <- тук",
        "└── a/",
        "    └── b/",
        "        └── c.txt (0.00 B)",
    ]

# ==========================================
# ПРИМЕРНИ ДАННИ
# ==========================================

def test_populate_builds_folders_and_returns_home():
    """Генераторът не мести текущата папка и не надвишава MAX_DEPTH"""
    fs = FileSystem()
    fs.create_directory("home")
    fs.change_directory("home")

    populate(fs, seed=42)

    assert fs.get_current_path() == "/home"
    names = [entry.name for entry in fs.list_directory()]
    assert names == [f"Project_Folder_{i}" for i in range(NUM_MAIN_FOLDERS)]
    # home е на ниво 1, главните папки на ниво 2
    deepest = max(entry.depth for entry in fs.walk() if entry.kind == KIND_DIR)
    assert deepest <= MAX_DEPTH + 1

def test_populate_is_repeatable_with_seed():
    """Един и същ seed дава едно и също дърво"""
    first = render_tree(populate(FileSystem(), seed=7))
    second = render_tree(populate(FileSystem(), seed=7))
    assert first == second

def test_populate_twice_continues_numbering():
    """Второ пълнене на същата папка не се чупи, номерацията продължава"""
    fs = FileSystem()

    populate(fs, seed=1)
    populate(fs, seed=2)

    names = [entry.name for entry in fs.list_directory()]
    assert names == [f"Project_Folder_{i}" for i in range(2 * NUM_MAIN_FOLDERS)]
    assert fs.get_current_path() == "/"

def test_populate_skips_taken_names():
    """Заетите номера се прескачат"""
    fs = FileSystem()
    fs.create_directory("Project_Folder_1")

    populate(fs, seed=3)

    names = [entry.name for entry in fs.list_directory()]
    assert names == ["Project_Folder_1", "Project_Folder_0", "Project_Folder_2", "Project_Folder_3"]
