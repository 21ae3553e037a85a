"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from cvtex.contexts.templating.exceptions import TemplateRenderError
from cvtex.contexts.templating.latex_generator import ResumeToLaTeXConverter
from cvtex.contexts.templating.registries import TemplateRegistry

SECTION_TYPES = ["header", "summary", "experience", "projects", "education", "skills"]


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("type_name", SECTION_TYPES)
def test_every_section_template_loads(type_name):
    registry = TemplateRegistry()
    assert registry.get_template(type_name) is not None
    assert registry.is_cached(type_name)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("skills")
    template2 = registry.get_template("skills")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("experience")

    assert isinstance(path, Path)
    assert path.name == "template.tex.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()
    registry.get_template("skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_latex_filters_registered():
    registry = TemplateRegistry()
    for name in ("latex", "bullets", "newlines", "href"):
        assert name in registry.env.filters


@pytest.mark.unit
def test_custom_delimiters_leave_latex_braces_alone():
    registry = TemplateRegistry()
    template = registry.env.from_string(r"\textbf{<<< value | latex >>>} {{literal}}")
    assert template.render(value="R&D") == r"\textbf{R\&D} {{literal}}"


@pytest.mark.unit
def test_skills_template_renders():
    registry = TemplateRegistry()
    template = registry.get_template("skills")
    result = template.render(heading="Habilidades", skills=["C#", "Node.js"], separator=", ")
    assert r"\section*{Habilidades}" in result
    assert r"C\#, Node.js" in result


@pytest.mark.unit
def test_available_types_lists_every_section():
    assert TemplateRegistry().available_types() == sorted(SECTION_TYPES)


@pytest.mark.unit
def test_missing_template_message_lists_available_types():
    with pytest.raises(TemplateNotFound, match="Available"):
        TemplateRegistry().get_template("awards")


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    section_dir = tmp_path / "types" / "skills"
    section_dir.mkdir(parents=True)
    (section_dir / "template.tex.jinja").write_text("<<< skills | join(separator) >>>")

    registry = TemplateRegistry(tmp_path)

    assert registry.available_types() == ["skills"]
    assert registry.get_template("skills").render(skills=["A", "B"], separator="/") == "A/B"


@pytest.mark.unit
def test_undefined_variable_wrapped_in_render_error(tmp_path, sample_resume):
    section_dir = tmp_path / "types" / "skills"
    section_dir.mkdir(parents=True)
    (section_dir / "template.tex.jinja").write_text("<<< missing_variable >>>")
    converter = ResumeToLaTeXConverter(template_registry=TemplateRegistry(tmp_path))

    with pytest.raises(TemplateRenderError) as exc_info:
        converter.convert_skills(sample_resume)

    assert exc_info.value.type_name == "skills"
    assert exc_info.value.template_path == section_dir / "template.tex.jinja"
    assert "section=skills" in str(exc_info.value)
