"""Logic for inferring the semantic role of a component from its name."""

ROLE_CATALOG: dict[str, str] = {
    "accordion": "accordion",
    "accordionitem": "accordion-item",
    "accordiontoggle": "accordion-toggle",
    "accordioncontent": "accordion-content",
    "alert": "alert",
    "alertgroup": "alert-group",
    "avatar": "avatar",
    "button": "button",
    "card": "card",
    "cardbody": "card-body",
    "cardheader": "card-header",
    "cardtitle": "card-title",
    "cardfooter": "card-footer",
    "modal": "modal",
    "modalcontent": "modal-content",
    "modalheader": "modal-header",
    "modalbody": "modal-body",
    "modalfooter": "modal-footer",
    "textinput": "text-input",
    "textarea": "text-area",
    "select": "select",
    "checkbox": "checkbox",
    "radio": "radio",
    "switch": "switch",
    "form": "form",
    "formgroup": "form-group",
    "flex": "flex",
    "flexitem": "flex-item",
    "table": "table",
    "tr": "table-row",
    "td": "table-cell",
    "th": "table-header",
    "thead": "table-head",
    "tbody": "table-body",
    "label": "label",
    "link": "link",
    "drawer": "drawer",
    "toolbar": "toolbar",
    "toolbaritem": "toolbar-item",
    "menutoggle": "menu-toggle",
    "dropdownitem": "dropdown-item",
}


def infer_role(component_name: str) -> str:
    """Look up the role for a component; unknown names map to themselves."""
    name = component_name.lower()
    return ROLE_CATALOG.get(name, name)
