from __future__ import annotations

import pytest

from src.hr_payroll.hr_payroll.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.hr_payroll.hr_payroll.database.mysql_base import load_json


def test_sql_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); UPDATE t SET x=\"c;d\";\nSELECT 1"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'UPDATE t SET x="c;d"',
        "SELECT 1",
    ]


def test_strip_create_db_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS payroll_db;\nUSE payroll_db;\nCREATE TABLE x (id INT);"

    assert _strip_create_db_and_use(sql).strip() == "CREATE TABLE x (id INT);"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, []),
        ("", []),
        ('["Autofahrer"]', ["Autofahrer"]),
        (b'["Autofahrer"]', ["Autofahrer"]),
        (["x"], ["x"]),
    ],
)
def test_load_json(value, expected):
    assert load_json(value, default=[]) == expected


def test_load_json_rejects_unknown_types():
    with pytest.raises(TypeError):
        load_json(42)
