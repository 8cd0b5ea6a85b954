from typing import Callable, List
import flet as ft

from gpacalc.core.grades import COURSE_COUNT
from gpacalc.services.calculator_service import GPACalculatorService


class FletFieldAdapter:
    """Field adapter over the form's TextFields; positions 1..N map to list index."""

    def __init__(
        self,
        credit_fields: List[ft.TextField],
        grade_fields: List[ft.TextField],
        output: ft.TextField,
    ) -> None:
        self.credit_fields = credit_fields
        self.grade_fields = grade_fields
        self.output = output

    def read_credit(self, position: int) -> str:
        return self.credit_fields[position - 1].value or ""

    def read_grade(self, position: int) -> str:
        return self.grade_fields[position - 1].value or ""

    def write_credit(self, position: int, value: str) -> None:
        self.credit_fields[position - 1].value = value

    def write_grade(self, position: int, value: str) -> None:
        self.grade_fields[position - 1].value = value

    def write_output(self, value: str) -> None:
        self.output.value = value

    def clear_output(self) -> None:
        self.output.value = ""

    def focus_credit(self, position: int) -> None:
        self.credit_fields[position - 1].focus()

    def bind_sanitizers(self, credit_rule: Callable[[str], str], grade_rule: Callable[[str], str]) -> None:
        def sanitizer(rule: Callable[[str], str]):
            def on_change(e: ft.ControlEvent) -> None:
                cleaned = rule(e.control.value or "")
                if cleaned != e.control.value:
                    e.control.value = cleaned
                    e.control.update()

            return on_change

        for field in self.credit_fields:
            field.on_change = sanitizer(credit_rule)
        for field in self.grade_fields:
            field.on_change = sanitizer(grade_rule)


def build_gpa_view(page: ft.Page) -> ft.View:
    credit_fields = [
        ft.TextField(label=f"Credit Hours {i}", width=160, keyboard_type=ft.KeyboardType.NUMBER)
        for i in range(1, COURSE_COUNT + 1)
    ]
    grade_fields = [
        ft.TextField(label=f"Grade {i}", width=120, max_length=1, capitalization=ft.TextCapitalization.CHARACTERS)
        for i in range(1, COURSE_COUNT + 1)
    ]
    avg_gpa = ft.TextField(label="GPA", width=160, read_only=True)
    status = ft.Text(color=ft.Colors.RED_400)

    def notify(message: str) -> None:
        status.value = message

        def close(_):
            page.close(dialog)

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Not enough data"),
            content=ft.Text(message),
            actions=[ft.TextButton("OK", on_click=close)],
        )
        page.open(dialog)

    fields = FletFieldAdapter(credit_fields, grade_fields, avg_gpa)
    calculator = GPACalculatorService(fields, notify)

    def on_calculate(_):
        status.value = ""
        calculator.calculate_gpa()
        page.update()

    def on_reset(_):
        status.value = ""
        calculator.reset_gpa()
        page.update()

    calculator.install_input_sanitizers()
    credit_fields[0].autofocus = True

    course_rows = [
        ft.Row(controls=[ft.Text(f"Course {i + 1}", width=80), credit_fields[i], grade_fields[i]])
        for i in range(COURSE_COUNT)
    ]

    return ft.View(
        route="/",
        controls=[
            ft.AppBar(title=ft.Text("GPA Calculator")),
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Text("Enter credit hours and a letter grade (A-F)", size=16),
                        *course_rows,
                        ft.Row(
                            controls=[
                                ft.Button("Calculate GPA", on_click=on_calculate),
                                ft.OutlinedButton("Reset", on_click=on_reset),
                            ]
                        ),
                        avg_gpa,
                        status,
                    ],
                ),
            ),
        ],
    )
