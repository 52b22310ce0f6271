"""Module whose import always fails, for type lookup tests."""

import not_a_real_dependency_for_injector_tests  # noqa: F401


class Thing:
    pass
