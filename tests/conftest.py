"""Shared fixtures for prompt repository tests."""

import pytest
import yaml

VALID_PROMPT = {
    "id": "a",
    "title": "Prompt A",
    "description": "A test prompt",
    "args": {"name": {"type": "string", "required": True}},
    "template": "Hello {{name}}",
}


def write_prompt(path, template="Hello {{name}}", **overrides):
    """Write a prompt YAML file, creating parent directories."""
    data = {**VALID_PROMPT, "template": template, **overrides}
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


def write_partial(root, name, content=""):
    """Write ``<root>/<name>.hbs``, creating parent directories."""
    path = root / f"{name}.hbs"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_registry(repo, groups, partials=None, version=1):
    """Write ``registry.yaml`` at *repo* from plain dicts."""
    data = {"version": version, "groups": groups}
    if partials is not None:
        data["partials"] = partials
    path = repo / "registry.yaml"
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture()
def repo(tmp_path):
    """Repository with one enabled group ``common`` holding ``a.yaml`` and partials enabled."""
    root = tmp_path / "repo"
    root.mkdir()
    write_registry(
        root,
        {"common": {"path": "common", "enabled": True, "prompts": ["a.yaml"]}},
        partials={"enabled": True, "path": "partials"},
    )
    write_prompt(root / "common" / "a.yaml")
    (root / "partials").mkdir()
    return root


@pytest.fixture()
def partials_dir(tmp_path):
    """Empty partials directory."""
    path = tmp_path / "partials"
    path.mkdir()
    return path
