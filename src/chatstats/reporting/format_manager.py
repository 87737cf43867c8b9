class FormatManager:
    def __init__(self, workbook):
        self.workbook = workbook

        self.header_format = self.create_format({
            "bold": True,
            "bottom": 1,
        })

        # Table/report body cells
        self.data_cell_format = self.create_format({
            "valign": "top",
            "text_wrap": True,
        })

    def create_format(self, properties):
        return self.workbook.add_format(properties)
