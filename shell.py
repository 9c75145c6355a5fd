import argparse
import logging

from errors import NamespaceError
from filesystem import FileSystem
from generate_test_data import populate
from render import render_tree
from utils import KIND_DIR, configure_logging, format_size

END_MARKER = "END"

# --- КОМАНДИ ---
# действие -> (изисква аргумент, променя дървото)
ACTIONS = {
    "list": (False, False),
    "mkdir": (True, True),
    "cd": (True, False),
    "touch": (True, True),
    "edit": (True, True),
    "view": (True, False),
    "rm": (True, True),
    "find": (True, False),
    "stat": (True, False),
    "pwd": (False, False),
    "tree": (False, False),
    "livetree": (False, False),
    "stats": (False, False),
    "help": (False, False),
}

INTUITIVE_COMMANDS = {
    "list": "list", "createfolder": "mkdir", "openfolder": "cd",
    "createfile": "touch", "editfile": "edit", "view": "view",
    "delete": "rm", "findfile": "find", "details": "stat", "where": "pwd",
    "tree": "tree", "livetree": "livetree", "report": "stats",
}

CLI_COMMANDS = {
    "ls": "list", "mkdir": "mkdir", "cd": "cd", "touch": "touch",
    "nano": "edit", "cat": "view", "rm": "rm", "find": "find",
    "stat": "stat", "pwd": "pwd", "tree": "tree", "livetree": "livetree",
    "info": "stats", "help": "help",
}

# номер -> (Unix команда, действие, въпрос за аргумент, фиксиран аргумент)
LEARNING_MENU = {
    "1": ("ls", "list", None, None),
    "2": ("mkdir", "mkdir", "Въведете име на папка: ", None),
    "3": ("cd", "cd", "Въведете име на папка: ", None),
    "4": ("cd ..", "cd", None, ".."),
    "5": ("touch", "touch", "Въведете име на файл: ", None),
    "6": ("cat", "view", "Въведете име на файл: ", None),
    "7": ("nano", "edit", "Въведете име на файл: ", None),
    "8": ("rm", "rm", "Въведете име на файл/папка: ", None),
    "9": ("find", "find", "Въведете текст за търсене: ", None),
    "10": ("stat", "stat", "Въведете име на файл: ", None),
    "11": ("pwd", "pwd", None, None),
    "12": ("tree", "tree", None, None),
    "13": ("livetree", "livetree", None, None),
    "14": ("info", "stats", None, None),
}

MODES = {"1": "intuitive", "2": "learning", "3": "cli"}


class Shell:
    """Текстов интерфейс с три режима върху един FileSystem."""

    def __init__(self, fs=None, input_func=input, output=print):
        self.fs = fs if fs is not None else FileSystem()
        self.input = input_func
        self.output = output
        self.live_tree = False

    # --- ИЗПЪЛНЕНИЕ НА ДЕЙСТВИЯ ---
    def perform(self, action, arg=""):
        mutates = ACTIONS[action][1]
        try:
            getattr(self, f"do_{action}")(arg)
        except NamespaceError as e:
            logging.warning(f"Отказана команда {action} {arg!r}: {e}")
            self.output(f"Грешка: {e}")
            return False
        if mutates and self.live_tree:
            self.output(render_tree(self.fs))
        return True

    def do_list(self, arg):
        self.output(f"\n--- Папка: {self.fs.get_current_path()} ---")
        entries = self.fs.list_directory()
        if not entries:
            self.output("(празна)")
        for entry in entries:
            if entry.kind == KIND_DIR:
                self.output(f"[DIR]  {entry.name}")
            elif entry.size:
                self.output(f"[FILE] {entry.name} ({entry.size} байта)")
            else:
                self.output(f"[FILE] {entry.name}")

    def do_mkdir(self, name):
        self.fs.create_directory(name)
        self.output(f"✓ Папка '{name}' е създадена")

    def do_cd(self, target):
        self.fs.change_directory(target)
        self.output(f"✓ Текуща папка: {self.fs.get_current_path()}")

    def do_touch(self, name):
        self.fs.create_file(name)
        self.output(f"✓ Файл '{name}' е създаден")

    def do_edit(self, name):
        # Проверяваме файла преди да искаме съдържание
        self.fs.read_file(name)
        self.output(f"Въведете съдържание (напишете '{END_MARKER}' на нов ред за край):")
        content = self.read_block()
        self.fs.write_file(name, content)
        self.output(f"✓ Файл '{name}' е записан ({len(content)} байта)")

    def do_view(self, name):
        content = self.fs.read_file(name)
        self.output(f"\n--- Съдържание на {name} ---")
        self.output(content if content else "(празен)")

    def do_rm(self, name):
        self.fs.delete_entry(name)
        self.output(f"✓ '{name}' е изтрит")

    def do_find(self, query):
        self.output(f"Търсене на '{query}'...")
        results = self.fs.search_file(query)
        if not results:
            self.output("Няма намерени файлове")
        for path in results:
            self.output(f"Намерен: {path}")

    def do_stat(self, name):
        info = self.fs.file_info(name)
        self.output("\n--- Информация ---")
        self.output(f"Име: {info.name}")
        self.output(f"Тип: {'Папка' if info.kind == KIND_DIR else 'Файл'}")
        self.output(f"Размер: {info.size} байта ({format_size(info.size)})")
        self.output(f"Създаден: {info.created.strftime('%d/%m/%Y %H:%M:%S')}")
        self.output(f"Променен: {info.modified.strftime('%d/%m/%Y %H:%M:%S')}")

    def do_pwd(self, arg):
        self.output(self.fs.get_current_path())

    def do_tree(self, arg):
        self.output(render_tree(self.fs))

    def do_livetree(self, arg):
        self.live_tree = not self.live_tree
        self.output("✓ Живото дърво е " + ("включено" if self.live_tree else "изключено"))

    def do_stats(self, arg):
        stats = self.fs.display_stats()
        self.output("\n--- Статистика ---")
        self.output(f"Общо файлове: {stats.files}")
        self.output(f"Общо папки: {stats.directories}")
        self.output(f"Общ размер: {stats.total_size} байта")

    def do_help(self, arg):
        self.output("КОМАНДИ: " + ", ".join(CLI_COMMANDS) + ", mode, exit")

    def read_block(self):
        lines = []
        while True:
            try:
                line = self.input("")
            except EOFError:
                break
            if line == END_MARKER:
                break
            lines.append(line + "\n")
        return "".join(lines)

    # --- РЕЖИМИ ---
    def run_command_mode(self, commands, prompt, usage):
        """Цикъл за режимите с текстови команди. Връща 'mode' или 'exit'."""
        while True:
            try:
                line = self.input(prompt())
            except EOFError:
                return "exit"
            if not line.strip():
                continue

            cmd, _, args = line.strip().partition(" ")
            args = args.strip()
            if cmd == "mode":
                return "mode"
            if cmd in ("exit", "quit"):
                return "exit"
            if cmd not in commands:
                self.output(f"Непозната команда: {cmd}")
                continue

            action = commands[cmd]
            if ACTIONS[action][0] and not args:
                self.output(usage(cmd))
                continue
            self.perform(action, args)

    def run_intuitive(self):
        self.output("КОМАНДИ: " + ", ".join(INTUITIVE_COMMANDS) + ", mode, exit")
        return self.run_command_mode(
            INTUITIVE_COMMANDS,
            lambda: f"FileSystem:{self.fs.get_current_path()}> ",
            lambda cmd: f"Употреба: {cmd} [име]",
        )

    def run_cli(self):
        self.do_help("")
        return self.run_command_mode(
            CLI_COMMANDS,
            lambda: "$ ",
            lambda cmd: f"{cmd}: липсващ аргумент",
        )

    def run_learning(self):
        while True:
            self.output("\n--- РЕЖИМ ЗА УЧЕНЕ ---")
            for number, (unix, _, _, _) in LEARNING_MENU.items():
                self.output(f"{number:>3}. {unix}")
            self.output(" 15. Към главното меню")
            self.output(" 16. Изход")
            try:
                choice = self.input("Изберете опция: ").strip()
            except EOFError:
                return "exit"

            if choice == "15":
                return "mode"
            if choice == "16":
                return "exit"
            if choice not in LEARNING_MENU:
                self.output("Невалиден избор. Опитайте отново.")
                continue

            unix, action, question, fixed_arg = LEARNING_MENU[choice]
            arg = fixed_arg or ""
            if question:
                try:
                    arg = self.input(question).strip()
                except EOFError:
                    return "exit"
            self.output(f"$ {unix} {arg}" if question else f"$ {unix}")
            self.perform(action, arg)

    def run(self, mode=None):
        runners = {"intuitive": self.run_intuitive, "learning": self.run_learning, "cli": self.run_cli}
        while True:
            if mode is None:
                self.output("\n=== FILE MANAGEMENT SYSTEM ===")
                self.output("  1. Интуитивен режим\n  2. Режим за учене\n  3. Пълен CLI режим\n  4. Изход")
                try:
                    choice = self.input("Изберете режим: ").strip()
                except EOFError:
                    choice = "4"
                if choice == "4":
                    break
                mode = MODES.get(choice)
                if mode is None:
                    self.output("Невалиден избор. Опитайте отново.")
                    continue

            if runners[mode]() == "exit":
                break
            mode = None
        self.output("Довиждане!")


def build_parser():
    parser = argparse.ArgumentParser(description="Файлова система в паметта")
    parser.add_argument("--mode", choices=sorted(MODES.values()), help="стартов режим без меню")
    parser.add_argument("--demo", action="store_true", help="попълва дървото с примерни данни")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging()
    fs = FileSystem()
    if args.demo:
        populate(fs)
    Shell(fs).run(args.mode)


if __name__ == "__main__":
    main()
