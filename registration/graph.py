import logging
from typing import Any, Callable, Dict, Literal, Mapping

from langgraph.graph import StateGraph, START, END

from config.form import FormConfig
from registration.schema import RegistrationSchema
from registration.state import FormStatus, SubmitState

logger = logging.getLogger(__name__)

Navigate = Callable[[str, Mapping[str, str]], Any]


class SubmitGraphFactory:
    """
    Builds the submit state machine:

        START -> validate -> navigate -> END   (all rules passed)
                          -> END               (field errors, still editing)

    A navigation failure also ends in the editing status, with the
    configured failure notice set and the field errors left empty.
    """

    def __init__(self, schema: RegistrationSchema, navigate: Navigate, config: FormConfig):
        self.schema = schema
        self.navigate = navigate
        self.config = config

    def validate_node(self, state: SubmitState) -> Dict[str, Any]:
        result = self.schema.validate(state.record)
        return {"validated": result.record, "errors": result.errors, "notice": None}

    @staticmethod
    def should_navigate(state: SubmitState) -> Literal["navigate", "editing"]:
        return "navigate" if state.validated is not None else "editing"

    def navigate_node(self, state: SubmitState) -> Dict[str, Any]:
        params = {self.config.name_param: state.validated.username}
        try:
            self.navigate(self.config.welcome_path, params)
        except Exception:
            logger.debug("navigation to %s failed, staying in editing", self.config.welcome_path)
            return {
                "validated": None,
                "status": FormStatus.EDITING,
                "notice": self.config.failure_notice,
            }

        return {"validated": None, "status": FormStatus.SUBMITTED, "errors": {}}

    def build(self) -> StateGraph:
        g = StateGraph(SubmitState)

        g.add_node("validate", self.validate_node)
        g.add_node("navigate", self.navigate_node)

        g.add_edge(START, "validate")
        g.add_conditional_edges(
            "validate",
            self.should_navigate,
            {"navigate": "navigate", "editing": END},
        )
        g.add_edge("navigate", END)

        return g

    def compile(self):
        return self.build().compile()
