"""Column schemas and search fields for the four export panels.

Titles and labels are translation keys resolved through the translator passed
to each builder, so the same schema works for every packaged locale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Final

from mx_gui.schema import columns as col
from mx_gui.schema.columns import BadgeStyle, ColumnDescriptor, selection_column, validate_columns
from mx_gui.schema.display import Blank, Placeholder
from mx_gui.schema.search import SearchField, SearchFieldKind, SearchOption, validate_fields

Translate = Callable[[str], str]

ROLE: Final[str] = "role"
FLOW: Final[str] = "flow"
BATCH: Final[str] = "batch"
ITSM: Final[str] = "itsm"
PANEL_NAMES: Final[tuple[str, ...]] = (ROLE, FLOW, BATCH, ITSM)

DEFAULT_ID_PREFIX: Final[int] = 7

# Batch template status -> (label key, colour)
BATCH_STATUS: Final[dict[str, tuple[str, str]]] = {
    "available": ("be_status_use", "#19be6b"),
    "draft": ("be_status_draft", "#c5c8ce"),
    "unauthorized": ("be_status_role", "#ed4014"),
}

# ITSM usage scene code -> label key
ITSM_SCENES: Final[dict[str, str]] = {
    "1": "scene_release",
    "2": "scene_request",
    "3": "scene_problem",
    "4": "scene_event",
    "5": "scene_change",
}


def _identity(key: str) -> str:
    return key


@dataclass(frozen=True)
class PanelSpec:
    """Fixed configuration of one panel."""

    name: str
    title: str
    row_key: str
    columns: tuple[ColumnDescriptor, ...]
    search_fields: tuple[SearchField, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", validate_columns(self.columns))
        object.__setattr__(self, "search_fields", validate_fields(self.search_fields))

    @property
    def data_columns(self) -> tuple[ColumnDescriptor, ...]:
        return tuple(column for column in self.columns if not column.is_selection)


def _name_and_id_search(t: Translate, prefix: str) -> tuple[SearchField, ...]:
    return (
        SearchField(key="name", placeholder=t(f"{prefix}_search_name")),
        SearchField(key="id", placeholder=t(f"{prefix}_search_id")),
    )


def scene_options(t: Translate = _identity) -> tuple[SearchOption, ...]:
    return tuple(SearchOption(value=code, label=t(label)) for code, label in ITSM_SCENES.items())


def build_role_spec(t: Translate = _identity) -> PanelSpec:
    return PanelSpec(
        name=ROLE,
        title=t("panel_role"),
        row_key="name",
        columns=(
            selection_column(),
            ColumnDescriptor(key="name", title=t("role_key"), min_width=200),
            ColumnDescriptor(key="displayName", title=t("role_display_name"), min_width=200),
            ColumnDescriptor(key="email", title=t("role_email"), min_width=200),
        ),
    )


def build_flow_spec(t: Translate = _identity, *, id_prefix: int = DEFAULT_ID_PREFIX) -> PanelSpec:
    return PanelSpec(
        name=FLOW,
        title=t("panel_flow"),
        row_key="id",
        columns=(
            selection_column(),
            ColumnDescriptor(
                key="name",
                title=t("flow_name"),
                min_width=100,
                formatter=col.text_with_badge("name", "version"),
            ),
            ColumnDescriptor(
                key="id",
                title=t("flow_id"),
                min_width=60,
                formatter=col.truncated("id", id_prefix),
            ),
            ColumnDescriptor(
                key="authPlugins",
                title=t("authPlugin"),
                min_width=60,
                formatter=col.badge_list("authPlugins"),
            ),
            ColumnDescriptor(key="rootEntity", title=t("instance_type"), min_width=60),
            ColumnDescriptor(
                key="mgmtRoles",
                title=t("be_mgmt_role"),
                min_width=60,
                formatter=col.badge_list("mgmtRolesDisplay"),
            ),
            ColumnDescriptor(
                key="userRoles",
                title=t("use_role"),
                min_width=60,
                formatter=col.badge_list("userRolesDisplay"),
            ),
        ),
        search_fields=_name_and_id_search(t, "flow"),
    )


def build_batch_spec(t: Translate = _identity) -> PanelSpec:
    status_styles = {
        code: BadgeStyle(label=t(label), color=color)
        for code, (label, color) in BATCH_STATUS.items()
    }
    return PanelSpec(
        name=BATCH,
        title=t("panel_batch"),
        row_key="id",
        columns=(
            selection_column(),
            ColumnDescriptor(key="name", title=t("be_template_name"), min_width=140),
            ColumnDescriptor(key="id", title=t("be_template_id"), min_width=100),
            ColumnDescriptor(key="pluginService", title=t("pluginService"), min_width=140),
            ColumnDescriptor(
                key="operateObject",
                title=t("be_instance_type"),
                min_width=120,
                formatter=col.badge("operateObject", "default", empty=Blank()),
            ),
            ColumnDescriptor(
                key="useRole",
                title=t("use_role"),
                min_width=120,
                formatter=col.badge_list("permissionToRole.USEDisplayName"),
            ),
            ColumnDescriptor(
                key="status",
                title=t("be_use_status"),
                min_width=90,
                formatter=col.mapped_badge("status", status_styles),
            ),
            ColumnDescriptor(key="updatedTime", title=t("table_updated_date"), min_width=120),
        ),
        search_fields=_name_and_id_search(t, "batch"),
    )


def build_itsm_spec(t: Translate = _identity) -> PanelSpec:
    scene_styles = {code: BadgeStyle(label=t(label)) for code, label in ITSM_SCENES.items()}
    return PanelSpec(
        name=ITSM,
        title=t("panel_itsm"),
        row_key="id",
        columns=(
            selection_column(),
            ColumnDescriptor(key="name", title=t("name"), width=200, resizable=True),
            ColumnDescriptor(
                key="version",
                title=t("version"),
                min_width=60,
                formatter=col.badge("version"),
            ),
            ColumnDescriptor(
                key="type",
                title=t("itsm_scene"),
                min_width=80,
                formatter=col.mapped_badge("type", scene_styles, fallback=Placeholder()),
            ),
            ColumnDescriptor(
                key="procDefName",
                title=t("procDefId"),
                min_width=100,
                formatter=col.text_with_badge("procDefName", "procDefVersion"),
            ),
            ColumnDescriptor(key="tags", title=t("tags"), min_width=130, formatter=col.badge("tags")),
            ColumnDescriptor(
                key="description",
                title=t("description"),
                min_width=120,
                resizable=True,
                formatter=col.ellipsis_text("description"),
            ),
            ColumnDescriptor(
                key="mgmtRoles",
                title=t("tw_template_owner_role"),
                min_width=120,
                formatter=col.badge_list("mgmtRoles", label_key="displayName"),
            ),
            ColumnDescriptor(
                key="useRoles",
                title=t("useRoles"),
                min_width=120,
                formatter=col.badge_list("useRoles", label_key="displayName"),
            ),
            ColumnDescriptor(key="updatedBy", title=t("updatedBy"), min_width=100),
            ColumnDescriptor(key="updatedTime", title=t("tm_updated_time"), min_width=130),
        ),
        search_fields=(
            SearchField(key="name", placeholder=t("itsm_search_name")),
            SearchField(
                key="scene",
                placeholder=t("itsm_search_scene"),
                kind=SearchFieldKind.SELECT,
                options=scene_options(t),
            ),
        ),
    )


def build_panel_specs(t: Translate = _identity, *, id_prefix: int = DEFAULT_ID_PREFIX) -> dict[str, PanelSpec]:
    """All four panel specs keyed by panel name, in display order."""
    return {
        ROLE: build_role_spec(t),
        FLOW: build_flow_spec(t, id_prefix=id_prefix),
        BATCH: build_batch_spec(t),
        ITSM: build_itsm_spec(t),
    }
