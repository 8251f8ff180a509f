from html import escape
from app.models.unit_model import UnitStatus, UnitType
from app.schemas.unit_response import StatusModel
from app.services.unit.unit_form_service import UnitFormController
from app.views.layout import render_button_form, render_dialog, render_options

STATUS_CHOICES = [(status.value, status.value) for status in UnitStatus]
TYPE_CHOICES = [(unit_type.value, unit_type.value.capitalize()) for unit_type in UnitType]


# 新增/編輯對話框
def render_form_dialog(form: UnitFormController) -> str:
    values = form.values
    title = "Edit Unit" if form.is_edit else "Create Unit"
    if form.busy:
        submit_label = "Saving..."
    else:
        submit_label = "Update" if form.is_edit else "Create"
    disabled = " disabled" if form.busy else ""
    status = values.status.value if values.status else None
    unit_type = values.type.value if values.type else None

    body = (
        f"<h2>{escape(title)}</h2>\n"
        "<form method=\"post\" action=\"/unit/form/submit\">\n"
        "<label for=\"name\">Name</label>\n"
        f"<input id=\"name\" name=\"name\" value=\"{escape(values.name)}\">\n"
        "<label for=\"status\">Status</label>\n"
        f"<select id=\"status\" name=\"status\">{render_options(STATUS_CHOICES, status, 'Select status')}</select>\n"
        "<label for=\"type\">Type</label>\n"
        f"<select id=\"type\" name=\"type\">{render_options(TYPE_CHOICES, unit_type, 'Select type')}</select>\n"
        f"<p><button type=\"submit\"{disabled}>{escape(submit_label)}</button></p>\n"
        "</form>\n"
        f"{render_button_form('/unit/form/close', 'Close')}"
    )
    return render_dialog(body)


# 刪除確認對話框
def render_delete_dialog(unit_name: str) -> str:
    body = (
        "<h2>Delete Unit</h2>\n"
        f"<p>Are you sure you want to delete <strong>{escape(unit_name)}</strong>? "
        "This action cannot be undone.</p>\n"
        f"{render_button_form('/unit/delete/cancel', 'Cancel')}\n"
        f"{render_button_form('/unit/delete/confirm', 'Delete')}"
    )
    return render_dialog(body)


# 狀態對話框
def render_status_dialog(status: StatusModel) -> str:
    css = "status-success" if status.is_success else "status-failure"
    icon = "&#10004;" if status.is_success else "&#10006;"
    body = (
        f"<div class=\"{css}\" role=\"status\">\n"
        f"<p class=\"icon\">{icon}</p>\n"
        f"<h2>{escape(status.title)}</h2>\n"
        f"<p>{escape(status.message)}</p>\n"
        "</div>\n"
        f"{render_button_form('/unit/status/dismiss', 'OK')}"
    )
    return render_dialog(body)
