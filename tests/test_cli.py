"""Tests for the CLI commands."""

import json
from datetime import datetime

from ledgerly.cli.main import cli
from ledgerly.database.factories import create_sqlite_database


def _invoke(cli_runner, cli_args, *args, **kwargs):
    return cli_runner.invoke(cli, [*cli_args, *args], **kwargs)


def _stored_records(data_dir):
    return json.loads((data_dir / "ledgerly" / "transactions.json").read_text())


class TestAdd:
    """Tests for the add and income commands."""

    def test_add_expense(self, cli_runner, cli_args, data_dir):
        result = _invoke(
            cli_runner,
            cli_args,
            "add",
            "--amount",
            "1 250,90",
            "--category",
            "groceries",
            "--date",
            "2025-09-21",
            "--note",
            "Weekly shop",
            "--payment",
            "Cash",
        )
        assert result.exit_code == 0, result.output
        assert "Recorded Groceries: -1,250.90" in result.output
        assert "Payment: Cash" in result.output
        assert "Note: Weekly shop" in result.output

        records = _stored_records(data_dir)
        assert len(records) == 1
        assert records[0]["amount"] == -1250.9
        assert records[0]["categoryKey"] == "groceries"
        assert records[0]["date"].startswith("2025-09-21T")

    def test_add_income(self, cli_runner, cli_args, data_dir):
        result = _invoke(cli_runner, cli_args, "income", "--amount", "2000")
        assert result.exit_code == 0, result.output
        assert "Recorded Salary: +2,000.00" in result.output
        assert _stored_records(data_dir)[0]["amount"] == 2000

    def test_invalid_amount(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "add", "--amount", "abc", "--category", "food")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "greater than zero" in result.output

    def test_zero_amount(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "add", "--amount", "0", "--category", "food")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_unknown_category(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "yachts")
        assert result.exit_code == 2

    def test_invalid_date(self, cli_runner, cli_args):
        result = _invoke(
            cli_runner, cli_args, "add", "--amount", "10", "--category", "food", "--date", "someday"
        )
        assert result.exit_code == 1
        assert "Invalid date format" in result.output


class TestHistory:
    """Tests for the history command."""

    def test_empty(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "history")
        assert result.exit_code == 0
        assert "No transactions found." in result.output

    def test_lists_newest_day_first(self, cli_runner, cli_args):
        _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "food", "--date", "2025-09-01")
        _invoke(cli_runner, cli_args, "add", "--amount", "20", "--category", "car", "--date", "2025-09-21")

        result = _invoke(cli_runner, cli_args, "history")
        assert result.exit_code == 0, result.output
        assert "Found 2 transaction(s):" in result.output
        assert result.output.index("21 Sep 2025") < result.output.index("01 Sep 2025")

    def test_date_filter(self, cli_runner, cli_args):
        _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "food", "--date", "2025-08-15")
        _invoke(cli_runner, cli_args, "add", "--amount", "20", "--category", "car", "--date", "2025-09-21")

        result = _invoke(
            cli_runner, cli_args, "history", "--start-date", "2025-09-01", "--end-date", "2025-09-30"
        )
        assert "Found 1 transaction(s):" in result.output
        assert "Car" in result.output
        assert "Cafe" not in result.output

    def test_verbose_shows_ids(self, cli_runner, cli_args, data_dir):
        _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "food", "--note", "Coffee")
        record_id = _stored_records(data_dir)[0]["id"]

        result = _invoke(cli_runner, cli_args, "history", "-v")
        assert f"ID: {record_id}" in result.output
        assert "Note: Coffee" in result.output

    def test_conflicting_period_flags(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "history", "--this-month", "--last-month")
        assert result.exit_code == 1
        assert "Only one period option" in result.output


class TestBalance:
    """Tests for the balance and monthly commands."""

    def test_balance_for_current_month(self, cli_runner, cli_args):
        _invoke(cli_runner, cli_args, "income", "--amount", "2000")
        _invoke(cli_runner, cli_args, "add", "--amount", "500", "--category", "food")

        result = _invoke(cli_runner, cli_args, "balance")
        assert result.exit_code == 0, result.output
        assert f"{datetime.now():%B %Y}" in result.output
        assert "2,000.00" in result.output
        assert "-500.00" in result.output
        assert "+1,500.00" in result.output

    def test_monthly(self, cli_runner, cli_args):
        _invoke(cli_runner, cli_args, "add", "--amount", "500", "--category", "food")
        _invoke(cli_runner, cli_args, "add", "--amount", "250,50", "--category", "car")
        _invoke(cli_runner, cli_args, "income", "--amount", "2000")

        result = _invoke(cli_runner, cli_args, "monthly")
        assert result.exit_code == 0, result.output
        assert f"Spent in {datetime.now():%B %Y}: 750.50" in result.output

    def test_monthly_previous_month_empty(self, cli_runner, cli_args):
        _invoke(cli_runner, cli_args, "add", "--amount", "500", "--category", "food")
        result = _invoke(cli_runner, cli_args, "monthly", "--offset", "-1")
        assert result.output.strip().endswith(": 0.00")


class TestCategories:
    """Tests for the categories command."""

    def test_expense_categories(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "categories")
        assert result.exit_code == 0
        assert "Expense categories:" in result.output
        assert "groceries" in result.output
        assert "salary" not in result.output

    def test_income_categories(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "categories", "--income")
        assert "Income categories:" in result.output
        assert "freelance" in result.output


class TestReset:
    """Tests for the reset command."""

    def test_reset(self, cli_runner, cli_args, data_dir):
        _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "food")
        _invoke(cli_runner, cli_args, "income", "--amount", "20")

        result = _invoke(cli_runner, cli_args, "reset", "--yes")
        assert result.exit_code == 0, result.output
        assert "Deleted 2 transaction(s)." in result.output
        assert _stored_records(data_dir) == []

    def test_reset_aborted(self, cli_runner, cli_args, data_dir):
        _invoke(cli_runner, cli_args, "add", "--amount", "10", "--category", "food")

        result = _invoke(cli_runner, cli_args, "reset", input="n\n")
        assert result.exit_code == 1
        assert len(_stored_records(data_dir)) == 1


class TestProfile:
    """Tests for the profile commands."""

    def test_not_signed_in(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "profile", "show")
        assert result.exit_code == 0
        assert "Not signed in." in result.output

    def test_sign_in_and_out(self, cli_runner, cli_args):
        result = _invoke(
            cli_runner, cli_args, "profile", "sign-in", "001234.abcd", "--name", "Alex"
        )
        assert result.exit_code == 0, result.output
        assert "Signed in as Alex" in result.output

        result = _invoke(cli_runner, cli_args, "profile", "show")
        assert "User ID: 001234.abcd" in result.output

        result = _invoke(cli_runner, cli_args, "profile", "sign-out")
        assert "Signed out." in result.output
        assert "Not signed in." in _invoke(cli_runner, cli_args, "profile", "show").output

    def test_guest(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "profile", "guest")
        assert "Using ledgerly as a guest." in result.output

    def test_sign_in_empty_identifier(self, cli_runner, cli_args):
        result = _invoke(cli_runner, cli_args, "profile", "sign-in", " ")
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestGlobalOptions:
    """Tests for options on the command group."""

    def test_invalid_log_level(self, cli_runner, cli_args):
        result = _invoke(cli_runner, [*cli_args, "--log-level", "LOUD"], "categories")
        assert result.exit_code == 2
        assert "Unknown log level" in result.output

    def test_debug_logging(self, cli_runner, cli_args):
        result = _invoke(cli_runner, [*cli_args, "--log-level", "DEBUG"], "history")
        assert result.exit_code == 0
        assert "No saved transactions found" in result.output

    def test_seed_demo(self, cli_runner, cli_args, data_dir):
        result = _invoke(cli_runner, [*cli_args, "--seed-demo"], "history")
        assert result.exit_code == 0, result.output
        assert "Found 120 transaction(s):" in result.output
        assert len(_stored_records(data_dir)) == 120

        # Seeding only happens when nothing was stored before
        result = _invoke(cli_runner, [*cli_args, "--seed-demo"], "history")
        assert "Found 120 transaction(s):" in result.output

    def test_first_run_clears_existing_file(self, cli_runner, cli_args, data_dir, temp_db):
        folder = data_dir / "ledgerly"
        folder.mkdir()
        (folder / "transactions.json").write_text(
            json.dumps(
                [
                    {
                        "id": "8f7c2f7e-6a5c-4d2f-9e43-6f1f0c7a9b10",
                        "date": "2025-09-21T12:00:00",
                        "amount": -500,
                        "categoryKey": "food",
                        "note": None,
                        "payment": "Card",
                    }
                ]
            )
        )

        result = _invoke(cli_runner, cli_args, "history")
        assert "No transactions found." in result.output
        assert _stored_records(data_dir) == []

        db = create_sqlite_database(database_path=temp_db.database_path)
        try:
            assert db.get_setting("first_clean_done") == "1"
        finally:
            db.disconnect()

    def test_data_dir_from_environment(self, cli_runner, temp_db, tmp_path, monkeypatch):
        monkeypatch.setenv("LEDGERLY_DATA_DIR", str(tmp_path / "env-data"))
        result = cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, "income", "--amount", "5"]
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "env-data" / "ledgerly" / "transactions.json").exists()
