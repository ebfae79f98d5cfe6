"""End-to-end integration test for depscript."""

from __future__ import annotations

from pathlib import Path

import depscript
from depscript import Settings, load_settings


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    f = tmp_path / filename
    f.write_text(content)
    return f


class TestEndToEnd:
    def test_full_pipeline(self, tmp_path):
        """Load settings and a templated script, compile it, and run it."""
        stage = tmp_path / "stage"
        stage.mkdir()
        dest = tmp_path / "dest"
        dest.mkdir()
        config = _write(
            tmp_path,
            "depscript.hcl",
            f"""
            staging_root = "{stage}"
            variables {{
                GREETING = "hello"
            }}
            """,
        )
        script = _write(
            tmp_path,
            "deps.ds",
            """
            // build an artifact and move it into place
            set "OUT={{ out_dir }}/artifact.txt"
            run "echo $[GREETING] > $[OUT]"
            extract "$[OUT] ./artifact.txt";
            """,
        )

        settings = load_settings(config)
        plan = depscript.load(
            script,
            context={"out_dir": str(stage)},
            settings=settings,
            cwd=str(dest),
        )
        assert plan.commands == [
            f"echo hello > {stage}/artifact.txt",
            f"mv {stage}/artifact.txt {dest}/artifact.txt",
        ]

        assert plan.execute() == []
        assert (dest / "artifact.txt").read_text() == "hello\n"
        assert not (stage / "artifact.txt").exists()

    def test_clone_plan_dry_run(self, tmp_path, caplog):
        """Clone commands are compiled but not executed in dry-run mode."""
        script = _write(
            tmp_path,
            "deps.ds",
            'clone "github.com/acme/tool@main" as "src"\nrun "make -C $[src]"\n',
        )
        plan = depscript.load(script, settings=Settings(staging_root=str(tmp_path)))
        src = plan.variables["src"]
        assert plan.commands[0].endswith(f"--branch main https://github.com/acme/tool {src}")
        assert plan.commands[1] == f"make -C {src}"

        with caplog.at_level("INFO", logger="depscript"):
            assert plan.execute(dry_run=True) == []
        assert caplog.text.count("[DRY RUN] Would run") == 2
