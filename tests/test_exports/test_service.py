"""Tests for export validation, naming and the export entry points."""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from mesocycle_engine.exceptions import ExportValidationError, MesocycleError
from mesocycle_engine.exports import service
from mesocycle_engine.exports.options import ExportOptions, ExportScope
from mesocycle_engine.exports.service import (
    NO_WEEKS_MESSAGE,
    export_filename,
    export_program_as_excel,
    export_program_as_pdf,
    resolve_selected_weeks,
    validate_export_options,
)


class TestResolveSelectedWeeks:
    def test_comma_string(self) -> None:
        assert resolve_selected_weeks("3, 1,3 ,x,9", 6) == (1, 3)

    def test_iterable(self) -> None:
        assert resolve_selected_weeks([0, 7, "4", 2.0, None, True], 6) == (2, 4)

    def test_fractions_dropped(self) -> None:
        assert resolve_selected_weeks("1.5, 2", 6) == (2,)

    def test_none_and_empty(self) -> None:
        assert resolve_selected_weeks(None, 6) == ()
        assert resolve_selected_weeks("", 6) == ()


class TestValidateExportOptions:
    def test_all_scope_passes_through(self, beginner_program) -> None:
        options = ExportOptions()
        assert validate_export_options(beginner_program, options) is options

    def test_selected_without_list_means_all(self, beginner_program) -> None:
        options = ExportOptions(scope=ExportScope.SELECTED, selected_weeks=None)
        assert validate_export_options(beginner_program, options) is options

    def test_selection_resolved(self, beginner_program) -> None:
        options = ExportOptions(scope=ExportScope.SELECTED, selected_weeks=(4, 2, 4, 40))
        assert validate_export_options(beginner_program, options).selected_weeks == (2, 4)

    @pytest.mark.parametrize("selection", [(), (0, 99)])
    def test_empty_selection_rejected(self, beginner_program, selection) -> None:
        options = ExportOptions(scope=ExportScope.SELECTED, selected_weeks=selection)
        with pytest.raises(ExportValidationError, match=NO_WEEKS_MESSAGE) as exc_info:
            validate_export_options(beginner_program, options)
        assert exc_info.value.field == "selected_weeks"
        assert isinstance(exc_info.value, MesocycleError)


class TestExportFilename:
    def test_format(self, beginner_program, fixed_now) -> None:
        assert (
            export_filename(beginner_program, "xlsx", fixed_now)
            == "mesocycle-strength-balanced-2026-03-02.xlsx"
        )

    def test_extension_dot_stripped(self, endurance_support_program, fixed_now) -> None:
        assert export_filename(endurance_support_program, ".pdf", fixed_now).endswith(
            "strength-endurance-support-2026-03-02.pdf"
        )


class TestExportEntryPoints:
    def test_excel_artifact(self, mixed_program, fixed_now) -> None:
        artifact = export_program_as_excel(mixed_program, ExportOptions(), fixed_now)
        assert artifact.filename == "mesocycle-mixed-balanced-2026-03-02.xlsx"
        assert artifact.mime_type.endswith("spreadsheetml.sheet")
        wb = load_workbook(BytesIO(artifact.data))
        assert "Sessions Tracker" in wb.sheetnames

    def test_excel_rejects_empty_selection(self, mixed_program, fixed_now) -> None:
        options = ExportOptions(scope=ExportScope.SELECTED, selected_weeks=(12,))
        with pytest.raises(ExportValidationError):
            export_program_as_excel(mixed_program, options, fixed_now)

    def test_pdf_artifact(self, mixed_program, fixed_now, monkeypatch) -> None:
        rendered = []
        monkeypatch.setattr(
            service, "build_pdf_bytes", lambda model: rendered.append(model) or b"%PDF-fake"
        )
        options = ExportOptions(scope=ExportScope.SELECTED, selected_weeks=(1, 3))
        artifact = export_program_as_pdf(mixed_program, options, fixed_now)
        assert artifact.filename == "mesocycle-mixed-balanced-2026-03-02.pdf"
        assert artifact.mime_type == "application/pdf"
        assert artifact.data == b"%PDF-fake"
        assert len(rendered) == 1
