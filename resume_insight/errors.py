from __future__ import annotations


class StepNotFoundError(LookupError):
    def __init__(self, step_id: str):
        super().__init__(f"Step with id {step_id} not found")
        self.step_id = step_id


class NoExecutorBoundError(LookupError):
    def __init__(self, step_id: str):
        super().__init__(f"No executor found for step {step_id}")
        self.step_id = step_id


class ResumeAnalysisError(RuntimeError):
    """Raised by the analyzer when a stage ended in error and no result can be assembled."""

    def __init__(self, step_id: str, title: str, message: str):
        super().__init__(f"{title} ({step_id}) failed: {message}")
        self.step_id = step_id
        self.title = title
        self.message = message
