"""
页面外框与共用的 HTML 片段
"""
from html import escape
from typing import Iterable, Optional, Tuple

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 0; background: #fafafa; color: #111; }
.container { max-width: 1100px; margin: 0 auto; padding: 16px; }
.toolbar, .footer { display: flex; gap: 16px; align-items: flex-end; margin: 16px 0; flex-wrap: wrap; }
.footer { justify-content: space-between; align-items: center; }
label { display: block; font-size: 14px; margin-bottom: 4px; }
table { width: 100%; border-collapse: collapse; background: #fff; }
th, td { border-bottom: 1px solid #e5e5e5; padding: 8px; text-align: left; }
td.center { text-align: center; }
td.actions { text-align: right; }
.badge { color: #fff; border-radius: 6px; padding: 2px 8px; font-size: 12px; }
.badge-capsule { background: #60a5fa; }
.badge-cabin { background: #c084fc; }
.inline { display: inline; }
.backdrop { position: fixed; inset: 0; background: rgba(0, 0, 0, .4); }
dialog { position: fixed; top: 20%; border: none; border-radius: 8px; padding: 24px; min-width: 360px; }
.status-success { color: #16a34a; }
.status-failure { color: #dc2626; }
"""


def render_document(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html lang=\"en\">\n"
        "<head>\n"
        "<meta charset=\"utf-8\">\n"
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f"<body>\n<div class=\"container\">\n{body}\n</div>\n</body>\n"
        "</html>\n"
    )


def render_options(
    choices: Iterable[Tuple[str, str]],
    selected: Optional[str],
    placeholder: Optional[str] = None,
) -> str:
    """產生 <option> 清單，choices 為 (value, label)"""
    options = []
    if placeholder is not None:
        mark = " selected" if not selected else ""
        options.append(f"<option value=\"\"{mark}>{escape(placeholder)}</option>")
    for value, label in choices:
        mark = " selected" if value == selected else ""
        options.append(f"<option value=\"{escape(value)}\"{mark}>{escape(label)}</option>")
    return "".join(options)


def render_button_form(action: str, label: str, disabled: bool = False) -> str:
    """單一按鈕的 POST 表單"""
    mark = " disabled" if disabled else ""
    return (
        f"<form class=\"inline\" method=\"post\" action=\"{escape(action)}\">"
        f"<button type=\"submit\"{mark}>{escape(label)}</button>"
        "</form>"
    )


def render_dialog(body: str) -> str:
    return f"<div class=\"backdrop\"></div>\n<dialog open>\n{body}\n</dialog>"
