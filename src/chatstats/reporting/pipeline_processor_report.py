from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from xlsxwriter import Workbook

from chatstats.common.utils import prepare_string_for_excel
from chatstats.interfaces.reportable import Reportable
from chatstats.processing.pipeline_manager import PipelineManager
from chatstats.reporting.format_manager import FormatManager


@dataclass(frozen=True)
class ReportContext:
    workbook: Workbook
    formats: FormatManager


class ExcelSheetWriter:
    def __init__(self, ctx: ReportContext, *, table_style: str = "Table Style Medium 9"):
        self._ctx = ctx
        self._table_style = table_style

    @staticmethod
    def sanitize_table_name(name: str) -> str:
        invalid_chars = ' +-*[]:/\\&()'
        for ch in invalid_chars:
            name = name.replace(ch, '')
        if not name or not name[0].isalpha():
            name = 'T_' + name
        return name[:255]

    def write_report_sheet(
        self,
        *,
        sheet_name: str,
        rows: Iterable[Sequence[Any]],
        create_table: bool,
        table_name: str,
    ) -> None:
        fm = self._ctx.formats
        sheet = self._ctx.workbook.add_worksheet(sheet_name)

        r_index = 0
        headers: Optional[Sequence[Any]] = None

        for row in rows:
            cell_format = fm.data_cell_format
            if r_index == 0:
                cell_format = fm.header_format
                headers = row

            for c_index, value in enumerate(row):
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    sheet.write_number(r_index, c_index, value, cell_format)
                else:
                    sheet.write_string(r_index, c_index, prepare_string_for_excel(value), cell_format)
            r_index += 1

        # A table needs at least one data row below the header
        if create_table and r_index > 1 and headers:
            num_rows = r_index
            num_cols = len(headers)
            sheet.add_table(0, 0, num_rows - 1, num_cols - 1, {
                "columns": [{"header": str(col)} for col in headers],
                "name": table_name,
                "style": self._table_style,
            })

        sheet.autofit()


class PipelineProcessorReport:
    def __init__(self, output_file: str, pipeline_manager: PipelineManager):
        self.__output_file = output_file
        self.__pipeline_manager = pipeline_manager
        self.__workbook = Workbook(output_file)
        self.__ctx = ReportContext(workbook=self.__workbook, formats=FormatManager(self.__workbook))
        self.__writer = ExcelSheetWriter(self.__ctx)

    def generate(self):
        for reportable in self.__pipeline_manager.get_reportables():
            self.__write_reportable(reportable)

    def __write_reportable(self, reportable: Reportable):
        for sheet_name, rows in reportable.report():
            self.__writer.write_report_sheet(
                sheet_name=sheet_name,
                rows=rows,
                create_table=reportable.create_data_table,
                table_name=ExcelSheetWriter.sanitize_table_name(sheet_name),
            )

    def close(self):
        self.__workbook.close()
        print("Please see report: {}".format(self.__output_file))
