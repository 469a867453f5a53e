"""
Document root: top level statements plus the post-processing configuration.
"""

from gowriter import errmsg
from gowriter.caller import fetch_caller_line
from gowriter.logging_config import logger
from gowriter.config import FormatterStep, GeneratorConfig, formatter_preset, syntax_checker
from gowriter.generator.statement import Statement, generate_statements
from gowriter.pipeline import apply_code_formatter, run_formatter_steps


class Root(Statement):
    """
    Top level container of a generated Go file.

    ``generate`` renders every statement and then, depending on the
    configuration, checks the syntax with ``gofmt -e`` and pipes the code
    through each configured formatter in order.
    """

    def __init__(self, *statements: Statement):
        self._statements = tuple(statements)
        self._config = GeneratorConfig()

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def add_statements(self, *statements: Statement) -> "Root":
        return self._evolve(statements=self._statements + statements)

    def statements(self, *statements: Statement) -> "Root":
        return self._evolve(statements=tuple(statements))

    def enable_syntax_checking(self) -> "Root":
        return self._evolve(config=self._config.model_copy(update={"syntax_checking": True}))

    def disable_syntax_checking(self) -> "Root":
        return self._evolve(config=self._config.model_copy(update={"syntax_checking": False}))

    def add_formatters(self, *steps: FormatterStep) -> "Root":
        formatters = self._config.formatters + tuple(steps)
        return self._evolve(config=self._config.model_copy(update={"formatters": formatters}))

    def formatters(self, *steps: FormatterStep) -> "Root":
        """Replace the formatter steps."""
        return self._evolve(config=self._config.model_copy(update={"formatters": tuple(steps)}))

    def add_formatter(self, command: str, *args: str) -> "Root":
        """Append an arbitrary formatter command."""
        if not command:
            raise errmsg.formatter_command_is_empty(fetch_caller_line())
        return self.add_formatters(FormatterStep(command=command, args=args))

    def gofmt(self, *args: str) -> "Root":
        """Append a ``gofmt`` step, e.g. ``gofmt("-s")``."""
        return self.add_formatters(formatter_preset("gofmt", *args))

    def goimports(self, *args: str) -> "Root":
        """Append a ``goimports`` step."""
        return self.add_formatters(formatter_preset("goimports", *args))

    def generate(self, indent_level: int = 0) -> str:
        generated = generate_statements(self._statements, indent_level)

        if self._config.syntax_checking:
            checker = syntax_checker()
            logger.debug(f"Checking syntax with '{checker.command_line}'")
            apply_code_formatter(generated, checker.command, *checker.args)

        return run_formatter_steps(generated, self._config.formatters)
