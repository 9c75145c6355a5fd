import pytest
from unittest.mock import patch

from filesystem import FileSystem
from shell import Shell, build_parser, main

def make_shell(lines, fs=None):
    """Shell с фалшив вход - когато редовете свършат, идва EOF"""
    feed = iter(lines)
    output = []

    def fake_input(prompt=""):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    return Shell(fs or FileSystem(), fake_input, output.append), output

# ==========================================
# ЧАСТ 1: ПЪЛЕН CLI РЕЖИМ
# ==========================================

def test_cli_basic_session():
    """Тест 1: mkdir, cd, touch, pwd"""
    shell, out = make_shell(["mkdir docs", "cd docs", "touch a.txt", "pwd", "exit"])
    shell.run("cli")

    assert "/docs" in out
    assert shell.fs.search_file("a") == ["/docs/a.txt"]
    assert out[-1] == "Довиждане!"

def test_cli_missing_operand():
    """Тест 2: Команда без аргумент показва подсказка и не прави нищо"""
    shell, out = make_shell(["mkdir", "rm", "exit"])
    shell.run("cli")

    assert "mkdir: липсващ аргумент" in out
    assert "rm: липсващ аргумент" in out
    assert shell.fs.list_directory() == []

def test_cli_unknown_command():
    """Тест 3: Непозната команда"""
    shell, out = make_shell(["format c:", "quit"])
    shell.run("cli")
    assert "Непозната команда: format" in out

def test_cli_edit_and_view():
    """Тест 4: nano чете редове до END, cat показва съдържанието"""
    shell, out = make_shell(["touch n.txt", "nano n.txt", "line1", "line2", "END", "cat n.txt", "exit"])
    shell.run("cli")

    assert shell.fs.read_file("n.txt") == "line1\nline2\n"
    assert "line1\nline2\n" in out

def test_cli_edit_missing_file_asks_nothing():
    """Тест 5: nano на липсващ файл не чака съдържание"""
    shell, out = make_shell(["nano ghost.txt", "exit"])
    shell.run("cli")
    assert any("Грешка:" in line and "ghost.txt" in line for line in out)
    assert out[-1] == "Довиждане!"

def test_cli_errors_are_reported_not_raised():
    """Тест 6: Грешките от дървото стават съобщения"""
    shell, out = make_shell(["cd nowhere", "cd ..", "mkdir box", "cd box", "touch x", "cd /", "rm box", "exit"])
    shell.run("cli")

    errors = [line for line in out if line.startswith("Грешка:")]
    assert len(errors) == 3
    assert "nowhere" in errors[0]
    assert "box" in errors[2]

def test_cli_find_stat_and_info():
    """Тест 7: find, stat и info"""
    fs = FileSystem()
    fs.create_file("report.txt", "hello")
    shell, out = make_shell(["find report", "find zzz", "stat report.txt", "info", "exit"], fs)
    shell.run("cli")

    assert "Намерен: /report.txt" in out
    assert "Няма намерени файлове" in out
    assert "Тип: Файл" in out
    assert "Общо файлове: 1" in out
    assert "Общо папки: 1" in out
    assert "Общ размер: 5 байта" in out

def test_cli_list_output():
    """Тест 8: ls показва папки, файлове и празна папка"""
    fs = FileSystem()
    shell, out = make_shell(["ls", "exit"], fs)
    shell.run("cli")
    assert "(празна)" in out

    fs.create_directory("beta")
    fs.create_file("alpha.txt", "abc")
    shell, out = make_shell(["ls", "exit"], fs)
    shell.run("cli")
    assert "[DIR]  beta" in out
    assert "[FILE] alpha.txt (3 байта)" in out

def test_livetree_prints_after_changes():
    """Тест 9: livetree рисува дървото след всяка промяна"""
    shell, out = make_shell(["livetree", "touch a.txt", "pwd", "exit"])
    shell.run("cli")

    assert "✓ Живото дърво е включено" in out
    trees = [line for line in out if line.startswith("/\n") or line.startswith("/  <- тук")]
    assert len(trees) == 1
    assert "└── a.txt (0.00 B)" in trees[0]

# ==========================================
# ЧАСТ 2: ИНТУИТИВЕН И УЧЕБЕН РЕЖИМ
# ==========================================

def test_intuitive_mode_commands():
    """Тест 10: createfolder/openfolder/where"""
    shell, out = make_shell(["createfolder projects", "openfolder projects", "where", "createfile", "exit"])
    shell.run("intuitive")

    assert "/projects" in out
    assert "Употреба: createfile [име]" in out

def test_intuitive_mode_rejects_cli_names():
    """Тест 11: ls не е команда в интуитивния режим"""
    shell, out = make_shell(["ls", "exit"])
    shell.run("intuitive")
    assert "Непозната команда: ls" in out

def test_learning_mode_echoes_unix_commands():
    """Тест 12: Учебният режим показва еквивалентната Unix команда"""
    shell, out = make_shell(["2", "docs", "3", "docs", "11", "4", "4", "16"])
    shell.run("learning")

    assert "$ mkdir docs" in out
    assert "$ cd docs" in out
    assert "/docs" in out
    assert out.count("$ cd ..") == 2
    # Вторият cd .. е в корена
    assert any(line.startswith("Грешка:") for line in out)

def test_learning_mode_invalid_choice():
    """Тест 13: Невалиден номер"""
    shell, out = make_shell(["99", "16"])
    shell.run("learning")
    assert "Невалиден избор. Опитайте отново." in out

def test_main_menu_switches_modes():
    """Тест 14: Главно меню -> CLI -> mode -> учебен -> 15 -> изход"""
    shell, out = make_shell(["3", "touch a.txt", "mode", "2", "15", "7", "4"])
    shell.run()

    assert shell.fs.search_file("a") == ["/a.txt"]
    assert "Невалиден избор. Опитайте отново." in out
    assert out[-1] == "Довиждане!"

def test_eof_ends_session():
    """Тест 15: Край на входа затваря програмата"""
    shell, out = make_shell(["1", "createfile x"])
    shell.run()
    assert out[-1] == "Довиждане!"

# ==========================================
# ЧАСТ 3: СТАРТИРАНЕ
# ==========================================

def test_parser_options():
    args = build_parser().parse_args(["--mode", "cli", "--demo"])
    assert args.mode == "cli"
    assert args.demo is True

    with pytest.raises(SystemExit):
        build_parser().parse_args(["--mode", "gui"])

def test_main_with_demo_data():
    with patch("shell.configure_logging") as fake_logging, patch("shell.Shell.run") as fake_run:
        main(["--demo", "--mode", "cli"])

    fake_logging.assert_called_once()
    fake_run.assert_called_once_with("cli")
