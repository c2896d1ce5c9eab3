"""
Tests for the template processor (public compile/render API).
"""

import random
import threading

import pytest

from tagc.config import LexerConfig, LoremConfig, TagcConfig
from tagc.errors import TagcUserError, UnknownModeError
from tagc.lorem import PARAGRAPHS
from tagc.template import (
    StatementBlock, StatementRegistry, Template, TemplateProcessingError, TemplateProcessor,
    TemplateSyntaxError, create_template_processor,
)
from tagc.template.statements import LoremStatement
from tests.infrastructure import make_processor, tokenize, write


class TestTemplateProcessor:

    def test_render_plain_text(self):
        assert make_processor().render("just text") == "just text"

    def test_render_default_lorem(self):
        assert make_processor().render("{% lorem %}") == PARAGRAPHS[0]

    def test_render_comment_and_lorem(self):
        text = "A{% comment %}{% lorem 5 w %}{% endcomment %}B{% lorem 2 w %}"
        assert make_processor().render(text) == "ABLorem ipsum"

    def test_compile_returns_reusable_template(self):
        template = make_processor().compile("x{% lorem 1 w %}", "t")

        assert isinstance(template, Template)
        assert template.name == "t"
        assert template.render() == "xLorem"
        assert template.render() == "xLorem"

    def test_syntax_error_is_wrapped(self):
        with pytest.raises(TemplateProcessingError) as exc_info:
            make_processor().render("{% lorem 2 x %}", "page.txt")

        err = exc_info.value
        assert err.template_name == "page.txt"
        assert isinstance(err.cause, TemplateSyntaxError)
        assert "page.txt" in str(err)
        assert "lorem-method must be either 'w', 'p' or 'b'." in str(err)
        assert isinstance(err, TagcUserError)

    def test_lexer_error_is_wrapped(self):
        with pytest.raises(TemplateProcessingError, match="Unclosed tag"):
            make_processor().render("{% lorem")

    def test_plugin_type_error_propagates(self):
        """A parser function returning a non-Statement is a bug, not a template error"""
        registry = StatementRegistry()
        registry.register("bad", lambda parser, args: "not a node")

        with pytest.raises(TypeError, match="expected Statement"):
            TemplateProcessor(registry).compile("{% bad %}")

    def test_generator_error_propagates_on_render(self):
        location = tokenize("{% lorem %}")[2]
        block = StatementBlock(location=location, name="lorem", statement=LoremStatement(location=location, mode="x"))
        template = Template(name="t", ast=[block])

        with pytest.raises(UnknownModeError) as exc_info:
            template.render(random=random.Random(0))
        assert not isinstance(exc_info.value, TagcUserError)

    def test_seeded_rendering_is_reproducible(self):
        processor = make_processor()
        text = "{% lorem 6 w random %}"

        first = processor.render(text, random=random.Random(42))
        second = processor.render(text, random=random.Random(42))

        assert first == second
        assert len(first.split(" ")) == 6

    def test_seed_from_config(self):
        config = TagcConfig(lorem=LoremConfig(seed=5))
        template = make_processor(config).compile("{% lorem 2 p random %}")
        assert template.seed == 5
        assert template.render() == template.render()

    def test_custom_delimiters(self):
        config = TagcConfig(lexer=LexerConfig(block_start="<%", block_end="%>"))
        assert make_processor(config).render("{% x %}<% lorem 1 w %>") == "{% x %}Lorem"

    def test_disabled_statement(self):
        processor = create_template_processor(TagcConfig(disabled_statements=["lorem"]))
        with pytest.raises(TemplateProcessingError, match="Unknown statement name 'lorem'"):
            processor.render("{% lorem %}")

    def test_render_file(self, tmp_path):
        path = write(tmp_path / "page.txt", "<{% lorem 3 w %}>")
        assert make_processor().render_file(path) == "<Lorem ipsum dolor>"

    def test_render_missing_file(self, tmp_path):
        with pytest.raises(TemplateProcessingError, match="Cannot read template"):
            make_processor().render_file(tmp_path / "missing.txt")

    def test_concurrent_rendering(self):
        template = make_processor().compile("{% lorem 3 p %}")
        expected = template.render()
        results = []

        def worker():
            results.append(template.render(random=random.Random()))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [expected] * 8
