import json
import logging
from pathlib import Path

import play


def test_play_prints_contact_report(tmp_path: Path, capsys, caplog):
    caplog.set_level(logging.INFO)
    snapshot = tmp_path / "drop.json"
    snapshot.write_text(
        json.dumps(
            {
                "position": {"x": 90, "y": 100},
                "card": {"rank": "5", "suit": "S"},
                "table": [
                    {"rank": "5", "suit": "H"},
                    {"type": "temporary_stack", "stackId": "s1", "cards": [{"rank": 3, "suit": "H"}, {"rank": 6, "suit": "S"}]},
                ],
            }
        )
    )
    assert play.main([str(snapshot), "--config", str(tmp_path / "missing.yaml")]) == 0
    out = capsys.readouterr().out
    assert '"has_contact": true' in out
    assert '"target_type": "loose_card"' in out
    assert "temporary_stack ['3-H', '6-S'] shows 9" in caplog.text
    assert "Intent: capture" in caplog.text
