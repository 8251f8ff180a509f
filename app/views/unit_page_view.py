from html import escape
from typing import List
from urllib.parse import quote
from app.models.unit_model import FILTER_ALL, PAGE_SIZE_OPTIONS
from app.schemas.unit_response import UnitResponseModel
from app.services.unit.unit_page_service import (
    ConfirmingDelete,
    Creating,
    Editing,
    ShowingStatus,
    UnitPageController,
    UnitPageState,
)
from app.views.layout import render_button_form, render_document, render_options
from app.views.unit_dialog_view import (
    STATUS_CHOICES,
    TYPE_CHOICES,
    render_delete_dialog,
    render_form_dialog,
    render_status_dialog,
)

PAGE_TITLE = "Unit Management"
_COLUMNS = 5


def render_unit_page(controller: UnitPageController) -> str:
    state = controller.state
    body = "\n".join([
        f"<h1>{PAGE_TITLE}</h1>",
        _render_toolbar(state),
        _render_table(state),
        _render_footer(state),
        _render_active_dialog(controller),
    ])
    return render_document(PAGE_TITLE, body)


def _render_toolbar(state: UnitPageState) -> str:
    status_choices = [(FILTER_ALL, "All")] + STATUS_CHOICES
    type_choices = [(FILTER_ALL, "All")] + TYPE_CHOICES
    return (
        "<div class=\"toolbar\">\n"
        "<form method=\"post\" action=\"/unit/search\" class=\"toolbar\">\n"
        "<div><label for=\"search-name\">Search by name</label>"
        f"<input id=\"search-name\" name=\"name\" placeholder=\"Search..\" value=\"{escape(state.name_filter)}\"></div>\n"
        "<div><label for=\"filter-status\">Filter status</label>"
        f"<select id=\"filter-status\" name=\"status\">{render_options(status_choices, state.status_filter)}</select></div>\n"
        "<div><label for=\"filter-type\">Filter type</label>"
        f"<select id=\"filter-type\" name=\"type\">{render_options(type_choices, state.type_filter)}</select></div>\n"
        "<button type=\"submit\">Search</button>\n"
        "</form>\n"
        f"{render_button_form('/unit/create', 'Create Unit +')}\n"
        "</div>"
    )


def _render_table(state: UnitPageState) -> str:
    if state.loading:
        rows = f"<tr class=\"loading\"><td colspan=\"{_COLUMNS}\" class=\"center\">Loading...</td></tr>"
    elif not state.units:
        rows = f"<tr class=\"empty\"><td colspan=\"{_COLUMNS}\" class=\"center\">No units found</td></tr>"
    else:
        rows = "\n".join(_render_row(unit) for unit in _visible_units(state))
    return (
        "<table>\n"
        "<thead><tr><th>ID</th><th>Name</th><th>Status</th><th>Type</th>"
        "<th class=\"actions\">Actions</th></tr></thead>\n"
        f"<tbody>\n{rows}\n</tbody>\n"
        "</table>"
    )


def _render_row(unit: UnitResponseModel) -> str:
    unit_path = f"/unit/{quote(unit.id, safe='')}"
    return (
        "<tr class=\"unit-row\">"
        f"<td>{escape(unit.id)}</td>"
        f"<td>{escape(unit.name)}</td>"
        f"<td>{escape(unit.status.value)}</td>"
        f"<td><span class=\"badge badge-{unit.type.value}\">{escape(unit.type.value.upper())}</span></td>"
        "<td class=\"actions\">"
        f"{render_button_form(unit_path + '/edit', 'Edit')}"
        f"{render_button_form(unit_path + '/delete', 'Delete')}"
        "</td></tr>"
    )


def _render_footer(state: UnitPageState) -> str:
    size_choices = [(str(size), str(size)) for size in PAGE_SIZE_OPTIONS]
    return (
        "<div class=\"footer\">\n"
        f"<p>Total {state.total} units</p>\n"
        "<div>\n"
        "<form class=\"inline\" method=\"post\" action=\"/unit/page/size\">"
        "<label class=\"inline\" for=\"page-size\">Table size</label> "
        f"<select id=\"page-size\" name=\"size\">{render_options(size_choices, str(state.page_size))}</select> "
        "<button type=\"submit\">Apply</button></form>\n"
        f"{render_button_form('/unit/page/previous', '<', disabled=not state.can_go_previous)}\n"
        f"<span>Page {state.page} of {max(state.total_pages, 1)}</span>\n"
        f"{render_button_form('/unit/page/next', '>', disabled=not state.can_go_next)}\n"
        "</div>\n"
        "</div>"
    )


def _render_active_dialog(controller: UnitPageController) -> str:
    dialog = controller.state.dialog
    if isinstance(dialog, (Creating, Editing)):
        return render_form_dialog(controller.form)
    if isinstance(dialog, ConfirmingDelete):
        return render_delete_dialog(dialog.unit.name)
    if isinstance(dialog, ShowingStatus):
        return render_status_dialog(dialog.status)
    return ""


def _visible_units(state: UnitPageState) -> List[UnitResponseModel]:
    # 表格列數不超過每頁筆數
    return state.units[:state.page_size]
