from io import StringIO

import pytest
from django.core.management import CommandError, call_command


def test_run_demo_prints_result():
    out = StringIO()
    call_command("run_demo", stdout=out)
    assert out.getvalue().strip() == "8"


def test_run_demo_reports_overflow(settings):
    # 5 does not fit in a 3-bit signed integer.
    settings.ARITHMETIC_INTEGER_BITS = 3
    with pytest.raises(CommandError, match="Integer overflow"):
        call_command("run_demo")
