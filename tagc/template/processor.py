"""
Процессор шаблонов.

Публичный API, объединяющий лексер, парсер, реестр операторов и
рендерер в удобный интерфейс компиляции и рендеринга шаблонов.
"""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar

from .lexer import TemplateLexer
from .nodes import TemplateAST
from .parser import Parser
from .registry import StatementRegistry, create_default_registry
from .renderer import Renderer
from ..config import TagcConfig
from ..errors import TagcUserError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TemplateProcessingError(TagcUserError):
    """Общая ошибка обработки шаблона."""

    def __init__(self, message: str, template_name: str = "", cause: Optional[Exception] = None):
        super().__init__(f"Template processing error in '{template_name}': {message}")
        self.template_name = template_name
        self.cause = cause


@dataclass(frozen=True)
class Template:
    """
    Скомпилированный шаблон.

    Неизменяем; каждый вызов render() использует собственный Renderer,
    поэтому один шаблон можно рендерить из нескольких потоков.
    """
    name: str
    ast: TemplateAST
    seed: Optional[int] = None

    def render(self, random: Optional[_random.Random] = None) -> str:
        if random is None and self.seed is not None:
            random = _random.Random(self.seed)
        renderer = Renderer(random=random)
        # Ошибки операторов (в т.ч. UnknownModeError) пробрасываются как есть
        renderer.execute(self.ast)
        return renderer.getvalue()


class TemplateProcessor:
    """
    Основной процессор шаблонов.
    """

    def __init__(self, registry: StatementRegistry, config: Optional[TagcConfig] = None):
        """
        Инициализирует процессор шаблонов.

        Args:
            registry: Реестр операторов (передается извне для избежания глобального состояния)
            config: Конфигурация (разделители, seed генератора)
        """
        self.registry = registry
        self.config = config or TagcConfig()
        self.lexer_config = self.config.lexer

    def compile(self, template_text: str, template_name: str = "") -> Template:
        """
        Компилирует текст шаблона в AST.

        Raises:
            TemplateProcessingError: При лексической или синтаксической ошибке
        """
        def compile_text() -> Template:
            tokens = TemplateLexer(self.lexer_config).tokenize(template_text)
            ast = Parser(tokens, self.registry).parse()
            logger.debug(f"Compiled template '{template_name}' -> {len(ast)} nodes")
            return Template(name=template_name, ast=ast, seed=self.config.lorem.seed)

        return self._handle_template_errors(compile_text, template_name)

    def render(
        self,
        template_text: str,
        template_name: str = "",
        random: Optional[_random.Random] = None,
    ) -> str:
        """
        Компилирует и рендерит шаблон из текста.

        Args:
            template_text: Текст шаблона
            template_name: Опциональное имя шаблона для диагностики
            random: Источник случайности для операторов вроде lorem

        Returns:
            Отрендеренный текст
        """
        return self.compile(template_text, template_name).render(random=random)

    def render_file(self, path: Path, random: Optional[_random.Random] = None) -> str:
        """Рендерит шаблон из файла (UTF-8)."""
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateProcessingError(f"Cannot read template: {e}", str(path), e)
        return self.render(text, str(path), random=random)

    # ======= Внутренние методы =======

    def _handle_template_errors(self, func: Callable[[], T], template_name: str) -> T:
        """
        Общий обработчик ошибок для операций с шаблонами.

        Оборачивает только пользовательские ошибки; ошибки программирования
        (TypeError, ValueError из плагинов) пробрасываются с исходным traceback.
        """
        try:
            return func()
        except TemplateProcessingError:
            # Передаем ошибки обработки как есть
            raise
        except TagcUserError as e:
            raise TemplateProcessingError(str(e), template_name, e)


def create_template_processor(config: Optional[TagcConfig] = None) -> TemplateProcessor:
    """
    Создает процессор шаблонов с зарегистрированными встроенными операторами.

    Args:
        config: Конфигурация; по умолчанию — дефолтная

    Returns:
        Настроенный процессор шаблонов
    """
    config = config or TagcConfig()
    registry = create_default_registry(disabled=config.disabled_statements)
    return TemplateProcessor(registry, config)


__all__ = ["Template", "TemplateProcessor", "TemplateProcessingError", "create_template_processor"]
