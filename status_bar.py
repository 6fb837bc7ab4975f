import os


def render_status(context, width):
    """
    context keys: file_path, description, selection, total_lines, topline,
                  page_size
    """
    fname = context.get('file_path') or ''
    if fname:
        fname = os.path.basename(fname)
    description = context.get('description') or ''
    total = context.get('total_lines', 0)
    selection = context.get('selection', 0)

    if total <= 0:
        position = "empty"
        pct = "All"
    else:
        position = f"line {selection + 1}/{total}"
        topline = context.get('topline', 0)
        page_size = context.get('page_size', 1)
        if topline == 0 and topline + page_size >= total:
            pct = "All"
        elif topline == 0:
            pct = "Top"
        elif topline + page_size >= total:
            pct = "Bot"
        else:
            pct = f"{(100 * topline) // max(1, total - page_size)}%"

    parts = [p for p in (fname, description) if p]
    text = f" {' | '.join(parts)} | {position} {pct}" if parts else f" {position} {pct}"
    return text.ljust(width)[:width]
