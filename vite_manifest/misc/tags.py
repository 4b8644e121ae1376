def render_script(file_name: str) -> str:
    return f'<script type="module" src="{file_name}"></script>'


def render_stylesheet(file_name: str) -> str:
    return f'<link rel="stylesheet" href="{file_name}" />'


def render_preload(file_name: str) -> str:
    return f'<link rel="modulepreload" href="{file_name}" />'
