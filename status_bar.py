import os


def render_status(context, width):
    """
    context keys: file_path, shape, cursor_row, cursor_col, column_name, help
    """
    fname = context.get('file_path') or ''
    if fname:
        fname = os.path.basename(fname)
    rows, cols = context.get('shape', (0, 0))
    cursor_row = context.get('cursor_row', -1)
    cursor_col = context.get('cursor_col', 0)

    if rows:
        row_info = f"row {cursor_row + 1}/{rows}"
    else:
        row_info = "no rows"
    if cols:
        col_info = f"col {cursor_col + 1}/{cols}"
        name = context.get('column_name')
        if name:
            col_info = f"{col_info} {name}"
    else:
        col_info = "no columns"

    text = f" {fname} | {rows}x{cols} | {row_info} | {col_info}"
    help_text = context.get('help')
    if help_text:
        text = f"{text} | {help_text}"

    return text.ljust(width)[:width]
