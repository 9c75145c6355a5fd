from utils import KIND_DIR, format_size

BRANCH = "├── "
LAST = "└── "
PIPE = "│   "
BLANK = "    "
CURRENT_MARKER = "  <- тук"


def render_tree(fs):
    """Рисува цялото дърво като текстова диаграма, текущата папка е маркирана."""
    entries = fs.walk()
    lines = []
    # prefixes[d] е отстъпът за деца на ниво d + 1
    prefixes = [""]

    for i, entry in enumerate(entries):
        marker = CURRENT_MARKER if entry.is_current else ""
        if entry.depth == 0:
            lines.append(f"/{marker}")
            continue

        # Последно дете е, ако следващият елемент на същото ниво не съществува
        is_last = True
        for later in entries[i + 1:]:
            if later.depth < entry.depth:
                break
            if later.depth == entry.depth:
                is_last = False
                break

        prefix = prefixes[entry.depth - 1]
        if entry.kind == KIND_DIR:
            label = f"{entry.name}/"
        else:
            label = f"{entry.name} ({format_size(entry.size)})"
        lines.append(f"{prefix}{LAST if is_last else BRANCH}{label}{marker}")

        del prefixes[entry.depth:]
        prefixes.append(prefix + (BLANK if is_last else PIPE))

    return "\n".join(lines)
