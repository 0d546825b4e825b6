"""Field templates: the exact key set expected for each document type."""

from dataclasses import dataclass

from docintel.extraction.exceptions import TemplateError
from docintel.ocr.models import DocumentType


@dataclass(frozen=True)
class FieldTemplate:
    """Expected fields for one document type.

    An open-ended template keeps its baseline keys and additionally accepts
    whatever other keys the model reports.
    """

    document_type: DocumentType
    field_names: tuple[str, ...]
    open_ended: bool = False

    def __post_init__(self) -> None:
        if not self.field_names:
            raise TemplateError(f"Template for {self.document_type.value} has no fields")
        if len(set(self.field_names)) != len(self.field_names):
            raise TemplateError(f"Template for {self.document_type.value} has duplicate fields")

    def json_schema(self) -> dict[str, object] | None:
        """Strict response schema for closed templates; None for open-ended ones."""
        if self.open_ended:
            return None
        return {
            "type": "object",
            "properties": {name: {"type": "string"} for name in self.field_names},
            "required": list(self.field_names),
            "additionalProperties": False,
        }


TEMPLATES: dict[DocumentType, FieldTemplate] = {
    DocumentType.TRANSFER_DEED: FieldTemplate(
        document_type=DocumentType.TRANSFER_DEED,
        field_names=(
            "property_address",
            "owner_name",
            "previous_owner",
            "land_extent",
            "survey_plan_number",
            "deed_number",
            "registration_date",
            "district_secretariat",
            "assessment_number",
        ),
    ),
    DocumentType.SURVEY_PLAN: FieldTemplate(
        document_type=DocumentType.SURVEY_PLAN,
        field_names=(
            "plan_number",
            "survey_date",
            "surveyor_name",
            "property_boundaries",
            "land_extent",
            "subdivisions",
            "coordinates",
        ),
    ),
    DocumentType.TITLE_CERTIFICATE: FieldTemplate(
        document_type=DocumentType.TITLE_CERTIFICATE,
        field_names=(
            "certificate_number",
            "property_address",
            "owner_name",
            "land_extent",
            "nature_of_title",
            "encumbrances",
            "issue_date",
        ),
    ),
    DocumentType.GENERIC: FieldTemplate(
        document_type=DocumentType.GENERIC,
        field_names=(
            "property_address",
            "owner_name",
            "land_extent",
            "document_type",
            "reference_numbers",
            "dates",
            "key_information",
        ),
        open_ended=True,
    ),
}


def get_template(document_type: DocumentType) -> FieldTemplate:
    """Return the template for *document_type*, falling back to the generic one."""
    return TEMPLATES.get(document_type, TEMPLATES[DocumentType.GENERIC])
