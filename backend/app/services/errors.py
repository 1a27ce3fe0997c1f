class LLMError(Exception):
    """The language model call failed."""


class LLMQuotaError(LLMError):
    """Provider refused the call for quota, billing or credential reasons."""


class PipelineError(Exception):
    kind = "pipeline_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GenerationError(PipelineError):
    kind = "generation_error"


class GuardError(PipelineError):
    kind = "guard_error"


class TableMissing(PipelineError):
    kind = "table_missing"


class TableEmpty(PipelineError):
    kind = "table_empty"


class NoMatchingRows(PipelineError):
    kind = "no_matching_rows"


class DatabaseError(PipelineError):
    kind = "database_error"


class ExplanationError(PipelineError):
    kind = "explanation_error"


class ChartConfigError(PipelineError):
    kind = "chart_config_error"
