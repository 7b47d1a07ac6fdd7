import re
import time

from xlbase import timestamp

WHEN = 1_600_000_000 * 1_000_000 + 123456


def test_now_is_microseconds_since_epoch():
    first = timestamp.now()
    second = timestamp.now()
    assert second >= first
    assert abs(first / 1_000_000 - time.time()) < 5


def test_format_with_micro_layout():
    text = timestamp.format_time(True, WHEN)
    assert re.fullmatch(r"\d{8}-\d{2}:\d{2}:\d{2}\.\d{6}", text)
    assert text.endswith(".123456")


def test_format_without_micro_is_prefix():
    with_micro = timestamp.format_time(True, WHEN)
    without = timestamp.format_time(False, WHEN)
    assert re.fullmatch(r"\d{8}-\d{2}:\d{2}:\d{2}", without)
    assert with_micro.startswith(without)


def test_small_microseconds_are_zero_padded():
    assert timestamp.format_time(True, 1_600_000_000 * 1_000_000 + 7).endswith(".000007")


def test_default_is_current_time():
    text = timestamp.format_time()
    assert re.fullmatch(r"\d{8}-\d{2}:\d{2}:\d{2}\.\d{6}", text)
    assert text[:4] == time.strftime("%Y")


def test_user_format_agrees_with_format_time():
    base = timestamp.format_time(False, WHEN)
    assert timestamp.user_format("%Y%m%d", WHEN) == base[:8]
    assert timestamp.user_format("%H:%M:%S", WHEN) == base[9:]
    assert timestamp.user_format(".%Y%m%d-%H%M%S", WHEN) == "." + base[:8] + "-" + base[9:].replace(":", "")