from typing import Optional


def print_list_with_title(title: str, items: list):
    """
    Prints a list of items with a title.

    :param title: The title for the list.
    :param items: The list of items to print.
    """
    if items:
        print(title)
        for item in items:
            print(item)
        print()


def print_summary(title: str, count: int):
    """
    Prints a summary title followed by its count.

    :param title: The title of the summary.
    :param count: The count to print.
    """
    print(f"{title}: {count}")


def format_average(value: Optional[float]) -> str:
    return "No data" if value is None else f"{value:f}"


def prepare_string_for_excel(value) -> str:
    """
    Converts a value to a string Excel accepts in a cell; Excel caps cells at 32767 characters
    and a leading '=' would be read as a formula.
    """
    text = '' if value is None else str(value)
    if text.startswith('='):
        text = "'" + text
    return text[:32767]
