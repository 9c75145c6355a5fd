import flet as ft

CURRENT_COLOR = "#34D399"

class CollapsibleDirectory(ft.Column):
    def __init__(self, dir_name, content_controls, auto_expand=False, is_current=False, on_open=None):
        super().__init__()
        self.spacing = 0
        self.dir_name = dir_name
        self.is_expanded = auto_expand

        self.icon_btn = ft.IconButton(
            icon=ft.Icons.KEYBOARD_ARROW_DOWN if auto_expand else ft.Icons.KEYBOARD_ARROW_RIGHT,
            icon_color=ft.Colors.BLUE_400,
            icon_size=20,
            on_click=self.toggle_expand,
            width=30, height=30,
            padding=0
        )

        # Текущата папка се оцветява, за да се вижда къде сме
        label = f"📂 {self.dir_name}" + ("  ◀ тук" if is_current else "")
        self.dir_label = ft.Text(label, weight=ft.FontWeight.BOLD, color=CURRENT_COLOR if is_current else ft.Colors.WHITE)

        self.files_container = ft.Container(
            content=ft.Column(controls=content_controls, spacing=0),
            visible=self.is_expanded,
            padding=ft.padding.only(left=24)
        )

        row_controls = [self.icon_btn, self.dir_label]
        if on_open:
            row_controls.append(ft.IconButton(ft.Icons.LOGIN, icon_size=16, width=28, height=28, padding=0, tooltip="Отвори", icon_color="#60A5FA", on_click=lambda e: on_open()))

        self.controls = [
            ft.Row(row_controls, spacing=0),
            self.files_container
        ]

    def toggle_expand(self, e):
        self.is_expanded = not self.is_expanded
        self.files_container.visible = self.is_expanded
        self.icon_btn.icon = ft.Icons.KEYBOARD_ARROW_DOWN if self.is_expanded else ft.Icons.KEYBOARD_ARROW_RIGHT
        self.update()
