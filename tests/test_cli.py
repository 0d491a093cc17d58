"""End-to-end runs of the demo scenarios through the command line."""

import pytest

from orderwatch import cli
from orderwatch.config import loaders
from orderwatch.config.settings import DemoConfig, MailboxConfig
from orderwatch.demo import run_channel_demo


@pytest.fixture(autouse=True)
def quiet_cli(monkeypatch, tmp_path):
    """Keep the CLI from replacing the root logger or reading a local .env."""
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)
    monkeypatch.delenv("ORDERWATCH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


def test_channel_demo_honours_opt_out(stream):
    config = DemoConfig(opt_out=["📱 SMSNotifier"], opt_out_after=2)

    publisher = run_channel_demo(config, stream=stream)
    lines = stream.getvalue().splitlines()

    assert publisher.status == "Delivered"
    assert [s.name for s in publisher.subscribers] == ["📧 EmailNotifier"]
    assert "📧 EmailNotifier received update: Order ORD987 is now 'Delivered'" in lines
    assert "📱 SMSNotifier received update: Order ORD987 is now 'Dispatched'" in lines
    assert "📱 SMSNotifier received update: Order ORD987 is now 'Delivered'" not in lines
    assert lines.count("📧 EmailNotifier shutting down...") == 1
    assert lines.count("📱 SMSNotifier shutting down...") == 1


def test_channel_demo_with_bounded_mailboxes(stream):
    config = DemoConfig(mailbox=MailboxConfig(mode="bounded", capacity=8))

    run_channel_demo(config, stream=stream)
    lines = stream.getvalue().splitlines()

    for status in ("Order Placed", "Dispatched", "Delivered"):
        assert f"📱 SMSNotifier received update: Order ORD987 is now '{status}'" in lines


def test_cli_runs_callback_variant(capsys):
    assert cli.main(["--variant", "callbacks"]) == 0

    out = capsys.readouterr().out
    assert "📧 Email to user@example.com: Order ORD987 is now 'Delivered'" in out


def test_cli_runs_channel_variant_from_config(tmp_path, capsys):
    path = tmp_path / "scenario.yaml"
    path.write_text("order_id: ORD55\nstatuses: [Placed]\n", encoding="utf-8")

    assert cli.main(["--config", str(path)]) == 0

    out = capsys.readouterr().out
    assert "📧 EmailNotifier received update: Order ORD55 is now 'Placed'" in out
    assert "📱 SMSNotifier shutting down..." in out


def test_cli_rejects_unknown_variant():
    with pytest.raises(SystemExit):
        cli.main(["--variant", "strategy"])


def test_cli_missing_config_file_raises(tmp_path, capsys):
    """A mistyped --config path must not fall back to the default scenario."""
    with pytest.raises(FileNotFoundError):
        cli.main(["--config", str(tmp_path / "typo.yaml")])

    assert "ORD987" not in capsys.readouterr().out


def test_cli_non_mapping_config_raises(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text("- Placed\n- Shipped\n", encoding="utf-8")

    with pytest.raises(ValueError):
        cli.main(["--config", str(path)])


def test_cli_dump_config_writes_scenario_without_running(tmp_path, capsys):
    source = tmp_path / "scenario.yaml"
    source.write_text("order_id: ORD55\nstatuses: [Placed]\n", encoding="utf-8")
    target = tmp_path / "out" / "resolved.yaml"

    assert cli.main(["--config", str(source), "--dump-config", str(target)]) == 0

    assert "received update" not in capsys.readouterr().out
    resolved = loaders.load_demo_config(target)
    assert resolved.order_id == "ORD55"
    assert resolved.subscribers == ["📧 EmailNotifier", "📱 SMSNotifier"]
