import flet as ft

from errors import NamespaceError
from filesystem import FileSystem
from generate_test_data import populate
from ui_components import CollapsibleDirectory
from utils import KIND_DIR, MAX_UI_FILES, SEPARATOR, configure_logging, natural_sort_key, format_size

BG_MAIN = "#0F1014"
BG_SIDEBAR = "#17181C"
BG_CONTAINER = "#1C1E26"
BORDER_COLOR = "#2E323F"
TEXT_PRIMARY = "#E2E8F0"
TEXT_SECONDARY = "#64748B"
ACCENT_BLUE = "#3B82F6"
BTN_CREATE = "#059669"
BTN_WRITE = "#D97706"
BTN_DELETE = "#DC2626"


def build_nested(entries):
    # Плоският обход (дълбочина първо) -> [(запис, [деца...])]
    root = (entries[0], [])
    stack = [root]
    for entry in entries[1:]:
        del stack[entry.depth:]
        item = (entry, [])
        stack[-1][1].append(item)
        stack.append(item)
    return root


def sort_entries(items, mode, ascending=True):
    # items са двойки (запис, деца) от build_nested; "Ред" пази реда на създаване
    rev = not ascending
    if mode == "Име":
        items.sort(key=lambda item: natural_sort_key(item[0].name), reverse=rev)
    elif mode == "Размер":
        items.sort(key=lambda item: (item[0].size, natural_sort_key(item[0].name)), reverse=rev)
    elif mode == "Дата":
        items.sort(key=lambda item: (item[0].modified, natural_sort_key(item[0].name)), reverse=rev)
    elif rev:
        items.reverse()
    return items


def open_path(fs, path):
    # Навигация по абсолютен път чрез относителни стъпки
    fs.change_directory(SEPARATOR)
    for part in path.strip(SEPARATOR).split(SEPARATOR):
        if part:
            fs.change_directory(part)


def open_file(fs, path):
    """Отваря файла по абсолютен път. Връща (съдържание, съобщение за смяна на папката или None)."""
    folder, name = path.rsplit(SEPARATOR, 1)
    folder = folder or SEPARATOR
    previous = fs.get_current_path()
    open_path(fs, folder)
    content = fs.read_file(name)
    if folder == previous:
        return content, None
    return content, f"Текущата папка е сменена на {folder}"


def main(page: ft.Page):
    configure_logging()
    page.title = "Файлова Система в Паметта"
    page.theme_mode = ft.ThemeMode.DARK
    page.bgcolor = BG_MAIN

    page.window.width = 1250
    page.window.height = 800
    page.padding = 0
    page.update()

    fs = FileSystem()
    sort_asc = [True]
    ui_count = [0]
    limit_reached = [False]

    def show_snack(text, color):
        page.open(ft.SnackBar(ft.Text(text, color=ft.Colors.WHITE), bgcolor=color))

    def run_action(action, success_msg=None):
        """Изпълнява операция и показва грешката, ако има такава."""
        try:
            result = action()
        except NamespaceError as ex:
            show_snack(f"Грешка: {ex}", "#EF4444")
            return None
        if success_msg:
            show_snack(success_msg, "#10B981")
        redraw_tree()
        return result

    def load_file(path, name):
        result = run_action(lambda: open_file(fs, path))
        if result is None:
            return
        content, moved_msg = result
        tf_name.value = name
        tf_content.value = content
        if moved_msg:
            show_snack(moved_msg, ACCENT_BLUE)
        page.update()

    # --- ДЕЙСТВИЯ ОТ ПАНЕЛА ---
    def do_create_file(e):
        run_action(lambda: fs.create_file(tf_name.value, tf_content.value or ""), f"Файлът '{tf_name.value}' е създаден.")

    def do_create_dir(e):
        run_action(lambda: fs.create_directory(tf_name.value), f"Папката '{tf_name.value}' е създадена.")

    def do_open(e):
        run_action(lambda: fs.change_directory(tf_name.value))

    def do_write(e):
        run_action(lambda: fs.write_file(tf_name.value, tf_content.value or ""), f"Файлът '{tf_name.value}' е записан.")

    def do_read(e):
        content = run_action(lambda: fs.read_file(tf_name.value))
        if content is not None:
            tf_content.value = content
            page.update()

    def do_info(e):
        info = run_action(lambda: fs.file_info(tf_name.value))
        if info:
            kind = "Папка" if info.kind == KIND_DIR else "Файл"
            show_snack(
                f"{kind} {info.name} | Размер: {format_size(info.size)} | "
                f"Създаден: {info.created.strftime('%d/%m/%Y %H:%M')} | Променен: {info.modified.strftime('%d/%m/%Y %H:%M')}",
                ACCENT_BLUE
            )

    def do_search(e):
        results = run_action(lambda: fs.search_file(tf_name.value or ""))
        search_list.controls.clear()
        if results is None:
            return
        if not results:
            search_list.controls.append(ft.Text("Няма намерени файлове", color=TEXT_SECONDARY, italic=True, size=12))
        for path in results:
            search_list.controls.append(ft.TextButton(
                f"📄 {path}", style=ft.ButtonStyle(color=TEXT_PRIMARY),
                on_click=lambda e, p=path: load_file(p, p.rsplit(SEPARATOR, 1)[1])
            ))
        page.update()

    def do_demo(e):
        run_action(lambda: populate(fs), "Добавени са примерни данни.")

    dlg_delete = ft.AlertDialog(modal=True, bgcolor=BG_CONTAINER)

    def prompt_delete(e):
        name = tf_name.value

        def close_dlg(e):
            page.close(dlg_delete)

        def execute_delete(e):
            page.close(dlg_delete)
            run_action(lambda: fs.delete_entry(name), f"'{name}' беше изтрит.")

        dlg_delete.title = ft.Text("Потвърждение", color=TEXT_PRIMARY, weight=ft.FontWeight.BOLD)
        dlg_delete.content = ft.Text(f"Изтриване на:\n{fs.get_current_path().rstrip(SEPARATOR)}{SEPARATOR}{name}?", color=TEXT_PRIMARY)
        dlg_delete.actions = [
            ft.TextButton("Отказ", on_click=close_dlg, style=ft.ButtonStyle(color=TEXT_SECONDARY)),
            ft.TextButton("Да, изтрий", on_click=execute_delete, style=ft.ButtonStyle(color="#EF4444", bgcolor="#450a0a"))
        ]
        dlg_delete.actions_alignment = ft.MainAxisAlignment.END
        page.open(dlg_delete)

    # --- ДЪРВО ---
    def create_file_row(entry):
        lbl_name = ft.Text(f"📄 {entry.name}", color=TEXT_PRIMARY, size=14, expand=True, tooltip=entry.path, no_wrap=True)
        lbl_size = ft.Text(format_size(entry.size), color=TEXT_SECONDARY, size=12, width=80, text_align=ft.TextAlign.RIGHT)
        btn_view = ft.IconButton(ft.Icons.VISIBILITY, icon_size=16, width=28, height=28, padding=0, tooltip="Отвори", icon_color="#60A5FA",
                                 on_click=lambda e: load_file(entry.path, entry.name))
        return ft.Row([lbl_name, lbl_size, btn_view], spacing=10, alignment=ft.MainAxisAlignment.SPACE_BETWEEN)

    def new_frame(entry, children):
        dirs = sort_entries([item for item in children if item[0].kind == KIND_DIR], dd_sort.value, sort_asc[0])
        files = sort_entries([item for item in children if item[0].kind != KIND_DIR], dd_sort.value, sort_asc[0])
        return {"entry": entry, "dirs": dirs, "files": files, "next": 0, "elements": []}

    def build_ui_tree(children):
        # Стек от рамки вместо рекурсия: първо подпапките, после файловете на папката
        frames = [new_frame(None, children)]
        while True:
            frame = frames[-1]
            if frame["next"] < len(frame["dirs"]) and not limit_reached[0]:
                entry, sub = frame["dirs"][frame["next"]]
                frame["next"] += 1
                frames.append(new_frame(entry, sub))
                continue

            frames.pop()
            elements = frame["elements"]
            for entry, _ in frame["files"]:
                if ui_count[0] >= MAX_UI_FILES:
                    if not limit_reached[0]:
                        elements.append(ft.Text(f"⚠️ Показани са първите {MAX_UI_FILES} файла.", color="#F59E0B", italic=True))
                        limit_reached[0] = True
                    break
                ui_count[0] += 1
                elements.append(create_file_row(entry))

            if not frames:
                return elements

            # Показваме празна папка, ако няма нищо вътре
            if not elements:
                elements.append(ft.Text(" (Празна папка)", color=TEXT_SECONDARY, italic=True, size=12))
            entry = frame["entry"]
            frames[-1]["elements"].append(CollapsibleDirectory(
                entry.name, elements, True, entry.is_current,
                on_open=lambda p=entry.path: run_action(lambda: open_path(fs, p))
            ))

    def redraw_tree():
        ui_count[0] = 0
        limit_reached[0] = False
        root_entry, children = build_nested(fs.walk())
        root_label = "/  ◀ тук" if root_entry.is_current else "/"
        tree_list.controls = [ft.Text(root_label, weight=ft.FontWeight.BOLD, color=TEXT_PRIMARY)] + build_ui_tree(children)

        stats = fs.display_stats()
        lbl_path.value = f"📍 {fs.get_current_path()}"
        lbl_summary.value = f"Папки: {stats.directories} | Файлове: {stats.files} | Общ размер: {format_size(stats.total_size)}"
        page.update()

    def toggle_sort_dir(e):
        sort_asc[0] = not sort_asc[0]
        e.control.icon = ft.Icons.ARROW_UPWARD if sort_asc[0] else ft.Icons.ARROW_DOWNWARD
        redraw_tree()

    # --- КОМПОНЕНТИ ---
    field_style = dict(border_color=BORDER_COLOR, focused_border_color=ACCENT_BLUE, text_style=ft.TextStyle(color=TEXT_PRIMARY), label_style=ft.TextStyle(color=TEXT_SECONDARY))
    tf_name = ft.TextField(label="Име / текст за търсене", width=260, **field_style)
    tf_content = ft.TextField(label="Съдържание", multiline=True, min_lines=4, max_lines=8, width=260, **field_style)

    def side_button(text, handler, bgcolor=BORDER_COLOR):
        return ft.ElevatedButton(text, on_click=handler, color=ft.Colors.WHITE, bgcolor=bgcolor, width=125)

    dd_sort = ft.Dropdown(
        value="Ред",
        options=[ft.dropdown.Option("Ред"), ft.dropdown.Option("Име"), ft.dropdown.Option("Размер"), ft.dropdown.Option("Дата")],
        width=130, text_size=13, on_change=lambda _: redraw_tree(),
        border_color=BORDER_COLOR, focused_border_color=ACCENT_BLUE, text_style=ft.TextStyle(color=TEXT_PRIMARY)
    )
    btn_sort_dir = ft.IconButton(icon=ft.Icons.ARROW_UPWARD, tooltip="Посока", icon_color=TEXT_SECONDARY, on_click=toggle_sort_dir)

    tree_list = ft.ListView(expand=True, spacing=5, auto_scroll=False)
    tree_container = ft.Container(content=tree_list, expand=True, border=ft.border.all(1, BORDER_COLOR), bgcolor=BG_CONTAINER, padding=15, border_radius=8)
    search_list = ft.ListView(height=140, spacing=0)

    lbl_path = ft.Text("📍 /", color=ACCENT_BLUE, size=16, weight=ft.FontWeight.W_600)
    lbl_summary = ft.Text("", color="#34D399")

    left_panel = ft.Container(
        width=300,
        padding=25,
        bgcolor=BG_SIDEBAR,
        content=ft.Column([
            ft.Text("Smart Manager", size=26, weight=ft.FontWeight.BOLD, color=ACCENT_BLUE),
            ft.Divider(color=BORDER_COLOR, height=30),
            ft.Text("ЕЛЕМЕНТ", size=11, weight="bold", color=TEXT_SECONDARY),
            tf_name,
            tf_content,
            ft.Row([side_button("📄 Нов файл", do_create_file, BTN_CREATE), side_button("📁 Нова папка", do_create_dir, BTN_CREATE)], wrap=True, width=260, spacing=10),
            ft.Row([side_button("💾 Запиши", do_write, BTN_WRITE), side_button("👁️ Прочети", do_read)], wrap=True, width=260, spacing=10),
            ft.Row([side_button("ℹ️ Детайли", do_info), side_button("🗑️ Изтрий", prompt_delete, BTN_DELETE)], wrap=True, width=260, spacing=10),
            ft.Divider(color=BORDER_COLOR, height=30),
            ft.Text("НАВИГАЦИЯ", size=11, weight="bold", color=TEXT_SECONDARY),
            ft.Row([
                side_button("📂 Отвори", do_open),
                side_button("⬆️ Нагоре", lambda _: run_action(lambda: fs.change_directory(".."))),
                side_button("🏠 Корен", lambda _: run_action(lambda: fs.change_directory(SEPARATOR))),
            ], wrap=True, width=260, spacing=10),
            ft.Divider(color=BORDER_COLOR, height=30),
            ft.Text("ТЪРСЕНЕ", size=11, weight="bold", color=TEXT_SECONDARY),
            ft.Row([side_button("🔍 Търси", do_search, ACCENT_BLUE), side_button("🎲 Примерни", do_demo)], wrap=True, width=260, spacing=10),
            search_list,
        ], scroll=ft.ScrollMode.AUTO)
    )

    right_panel = ft.Container(
        expand=True,
        padding=ft.padding.only(left=25, top=20, right=25, bottom=20),
        content=ft.Column([
            ft.Row([
                ft.Text("Дърво", size=24, weight=ft.FontWeight.W_600, color=TEXT_PRIMARY),
                ft.Container(expand=True),
                ft.Text("Сортиране:", color=TEXT_SECONDARY, size=13),
                dd_sort,
                btn_sort_dir
            ], alignment=ft.MainAxisAlignment.START),
            lbl_path,
            lbl_summary,
            tree_container,
        ])
    )

    page.add(
        ft.Row([left_panel, right_panel], expand=True, spacing=0)
    )
    redraw_tree()


if __name__ == "__main__":
    ft.app(target=main)
