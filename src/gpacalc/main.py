import flet as ft

from gpacalc.config.settings import configure_logging, settings
from gpacalc.ui.views.gpa_view import build_gpa_view


def main(page: ft.Page) -> None:
    page.title = "GPA Calculator"
    page.views.clear()
    page.views.append(build_gpa_view(page))
    page.update()


def run() -> None:
    configure_logging()
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
