import logging

import pytest

from blogseed.adapters import AdapterExecutionError
from blogseed.schema import SchemaScript, split_statements
from blogseed.security import DestructiveOperationError


def _tables(adapter):
    rows = adapter.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    return {row[0] for row in rows}


def test_split_statements_on_semicolons():
    text = """
    drop table if exists blog_entry;
    create table blog_entry (title varchar(100));

    insert into blog_entry(title) values ('a;b');
    """
    assert split_statements(text) == [
        "drop table if exists blog_entry",
        "create table blog_entry (title varchar(100))",
        "insert into blog_entry(title) values ('a;b')",
    ]


def test_split_statements_handles_comments_and_escaped_quotes():
    text = "-- header; not a statement\nselect 'it''s; fine';\n-- trailing"
    assert split_statements(text) == ["select 'it''s; fine'"]


def test_split_statements_skips_block_comments():
    text = "/* setup; run once */ create table a (x text);\nselect /* inline; */ 1;"
    assert split_statements(text) == ["create table a (x text)", "select   1"]


def test_split_statements_keeps_dollar_quoted_bodies_whole():
    body = "CREATE FUNCTION touch() RETURNS trigger AS $$ BEGIN NEW.created := now(); RETURN NEW; END; $$ LANGUAGE plpgsql"
    tagged = "DO $seed$ BEGIN PERFORM 1; END $seed$"
    assert split_statements(f"{body};\n{tagged};\nselect $1") == [body, tagged, "select $1"]


@pytest.mark.parametrize("text", ["select 'oops", "select 1 /* open", "do $$ begin; end"])
def test_split_statements_rejects_unterminated_quote(text):
    with pytest.raises(ValueError):
        split_statements(text)


def test_from_sql_flags_destructive_statements():
    script = SchemaScript.from_sql("DROP TABLE x; create table x (a text); truncate x")
    assert [s.destructive for s in script] == [True, False, True]


def test_destructive_script_refused_before_anything_runs(sqlite_adapter):
    script = SchemaScript.from_sql("create table first (a text); drop table if exists first")
    with pytest.raises(DestructiveOperationError):
        script.run(sqlite_adapter)
    assert "first" not in _tables(sqlite_adapter)


def test_failed_script_is_rolled_back(sqlite_adapter):
    script = SchemaScript.from_sql("create table keep (a text); insert into missing values (1)")
    with pytest.raises(AdapterExecutionError):
        script.run(sqlite_adapter)
    assert "keep" not in _tables(sqlite_adapter)


def test_render_requires_inline_values():
    script = SchemaScript()
    script.add("create table t (a text)")
    assert script.render() == "create table t (a text);\n"
    script.add("insert into t values (?)", ("x",))
    with pytest.raises(ValueError):
        script.render()


def test_confirmed_drop_is_logged_once(sqlite_adapter, caplog):
    caplog.set_level(logging.WARNING, logger="blogseed")
    SchemaScript.from_sql("create table gone (a text); drop table gone").run(sqlite_adapter, force=True)
    warnings = [
        record
        for record in caplog.records
        if record.levelno == logging.WARNING and not record.name.startswith("blogseed.adapters")
    ]
    assert [record.message for record in warnings] == ["Running destructive statement: drop table gone"]
