"""Pytest configuration and fixtures for helm-templexer tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from helm_templexer.core.models import Config, Deployment


@pytest.fixture
def config() -> Config:
    """Minimal enabled configuration with one deployment."""
    return Config(
        version="v2",
        chart=Path("charts/some-chart"),
        release_name="some-release",
        output_path=Path("manifests"),
        deployments=[Deployment(name="edge")],
    )


@pytest.fixture
def fake_chart(tmp_path: Path) -> Path:
    """A directory layout that passes validation (no real Helm chart)."""
    chart = tmp_path / "nginx-chart"
    (chart / "values").mkdir(parents=True)
    (chart / "Chart.yaml").write_text("name: nginx-chart\n")
    for name in ("default", "edge", "stage", "prod"):
        (chart / "values" / f"{name}.yaml").write_text(f"env: {name}\n")
    return chart


@pytest.fixture
def config_data() -> dict:
    """Configuration document as it would appear in a file."""
    return {
        "version": "v2",
        "enabled": True,
        "chart": "nginx-chart",
        "namespace": "my-namespace",
        "release_name": "my-app",
        "output_path": "manifests",
        "additional_options": ["--skip-crds", "--no-hooks"],
        "values": ["nginx-chart/values/default.yaml"],
        "deployments": [
            {
                "name": "edge-eu-w4",
                "values": ["nginx-chart/values/edge.yaml"],
                "additional_options": ["--set image.tag=latest"],
            },
            {
                "name": "next-edge-eu-w4",
                "enabled": False,
                "values": ["nginx-chart/values/does-not-exist.yaml"],
            },
            {"name": "stage-eu-w4", "values": ["nginx-chart/values/stage.yaml"]},
            {
                "name": "prod-eu-w4",
                "release_name": "my-app-prod-eu-w4",
                "values": ["nginx-chart/values/prod.yaml"],
            },
        ],
    }


@pytest.fixture
def config_file(tmp_path: Path, fake_chart: Path, config_data: dict) -> Path:
    """YAML configuration file next to the fake chart."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config_data, sort_keys=False))
    return path


@pytest.fixture
def fake_helm(tmp_path: Path) -> str:
    """Shell script standing in for helm; echoes its arguments as YAML."""
    script = tmp_path / "bin" / "helm"
    script.parent.mkdir()
    script.write_text(
        "#!/bin/sh\n"
        'if [ "$1" = "dependencies" ]; then\n'
        '  echo updated > "$PWD/deps-updated"\n'
        "  exit 0\n"
        "fi\n"
        'echo "# release: $2"\n'
        'echo "# chart: $3"\n'
        "shift 3\n"
        'for arg in "$@"; do echo "# arg: $arg"; done\n'
        'echo "image: nginx:latest"\n'
    )
    script.chmod(0o755)
    return str(script)
