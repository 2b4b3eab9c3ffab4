"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from src.attendify.attendify.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    for subject in container.subject_store.subjects:
        info = container.safety_calculator.safety_info(subject.present, subject.total)
        print(f"{subject.name}: {subject.percentage:.1f}% - {info.message}")
    print(container.analytics_service.overall_stats())


if __name__ == "__main__":
    main()
