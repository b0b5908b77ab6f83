"""Integration tests for end-to-end workflows."""

from creatorledger.cli.main import cli


def _invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def _last_word(output):
    return output.splitlines()[0].split()[-1]


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: event → income → paid → expenses → summary → list."""
    # Step 1: Record the gigs
    event_ids = {}
    for client, event_date in [
        ("Smith Wedding", "2023-04-01"),
        ("Jones Party", "2024-03-30"),
        ("Old Client", "2023-03-01"),
    ]:
        result = _invoke(
            cli_runner,
            temp_db,
            "event",
            "record",
            "--client",
            client,
            "--description",
            "Evening set",
            "--date",
            event_date,
        )
        assert result.exit_code == 0, result.output
        assert f"Client: {client}" in result.output
        event_ids[client] = _last_word(result.output)

    result = _invoke(cli_runner, temp_db, "event", "list")
    assert result.output.index("Old Client") < result.output.index("Smith Wedding")

    # Step 2: Record income for two gigs in the 2023-24 tax year
    income_ids = []
    for client, amount, received in [
        ("Smith Wedding", "100.00", "2023-04-06"),
        ("Jones Party", "£250.50", "2024-04-05"),
    ]:
        result = _invoke(
            cli_runner,
            temp_db,
            "income",
            "record",
            "--owner",
            "alice",
            "--event",
            event_ids[client],
            "--amount",
            amount,
            "--description",
            f"Performance for {client}",
            "--date",
            received,
        )
        assert result.exit_code == 0, result.output
        assert "Status: PENDING" in result.output
        income_ids.append(_last_word(result.output))

    # Income outside the tax year is ignored
    result = _invoke(
        cli_runner,
        temp_db,
        "income",
        "record",
        "--owner",
        "alice",
        "--event",
        event_ids["Old Client"],
        "--amount",
        "999.00",
        "--description",
        "Previous year",
        "--date",
        "2023-04-05",
    )
    assert result.exit_code == 0

    # Step 3: Mark one as paid
    result = _invoke(cli_runner, temp_db, "income", "mark-paid", income_ids[0])
    assert result.exit_code == 0
    assert "marked as PAID" in result.output

    # Step 4: Record expenses
    for category, amount in [("travel", "40.00"), ("TRAVEL", "10.00"), ("equipment", "75.25")]:
        result = _invoke(
            cli_runner,
            temp_db,
            "expense",
            "record",
            "--owner",
            "alice",
            "--amount",
            amount,
            "--category",
            category,
            "--description",
            "Costs",
            "--date",
            "2023-09-01",
        )
        assert result.exit_code == 0, result.output

    # Step 5: Generate the summary
    result = _invoke(cli_runner, temp_db, "summary", "generate", "--owner", "alice", "--tax-year", "2023")
    assert result.exit_code == 0, result.output
    assert "Generated summary" in result.output
    assert "2023-24 (2023-04-06 to 2024-04-05)" in result.output
    assert "GBP 350.50" in result.output
    assert "GBP 125.25" in result.output
    assert "GBP 225.25" in result.output
    assert "Equipment" in result.output
    assert result.output.index("Equipment") < result.output.index("Travel")
    summary_id = _last_word(result.output)

    # Step 6: Show and list summaries
    result = _invoke(cli_runner, temp_db, "summary", "show", summary_id)
    assert result.exit_code == 0
    assert "GBP 225.25" in result.output

    result = _invoke(cli_runner, temp_db, "summary", "list", "--owner", "alice")
    assert result.exit_code == 0
    assert summary_id in result.output


def test_loss_making_year_workflow(cli_runner, temp_db):
    """Test that a year with only expenses shows a negative profit."""
    result = _invoke(
        cli_runner,
        temp_db,
        "expense",
        "record",
        "--owner",
        "bob",
        "--amount",
        "500",
        "--category",
        "travel",
        "--description",
        "Tour van",
        "--date",
        "2023-05-01",
    )
    assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "summary", "generate", "--owner", "bob", "--tax-year", "2023")

    assert result.exit_code == 0, result.output
    assert "GBP 0.00" in result.output
    assert "-GBP 500.00" in result.output


def test_regenerating_keeps_both_summaries(cli_runner, temp_db):
    """Test that generating twice stores two summaries."""
    for _ in range(2):
        result = _invoke(cli_runner, temp_db, "summary", "generate", "--owner", "carol", "--tax-year", "2023")
        assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "summary", "list", "--owner", "carol")

    assert result.output.count("2023-24") == 2
