import logging
import threading
from typing import Any, Dict, Optional

from config.form import FormConfig
from registration.errors import FormBusyError, FormClosedError, UnknownFieldError
from registration.graph import Navigate, SubmitGraphFactory
from registration.schema import RegistrationSchema
from registration.state import FormRecord, FormSnapshot, FormStatus, SubmitState

logger = logging.getLogger(__name__)


class RegistrationFormController:
    """
    One registration form session.

    Field values are stored as given and only validated on submit(). Every
    public call returns an immutable FormSnapshot for the rendering layer.
    A session is not meant to be shared; calls are serialized. While a
    submit is running, a second submit is ignored and edits or resets
    raise FormBusyError.
    """

    def __init__(
        self,
        navigate: Navigate,
        schema: Optional[RegistrationSchema] = None,
        config: Optional[FormConfig] = None,
    ):
        self.schema = schema or RegistrationSchema()
        self.config = config or FormConfig()
        self.graph = SubmitGraphFactory(self.schema, navigate, self.config).compile()

        self._lock = threading.RLock()
        self._in_flight = threading.Lock()
        self._submitting = False
        self._record: FormRecord = {}
        self._snapshot = FormSnapshot()

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    @property
    def status(self) -> FormStatus:
        return self._snapshot.status

    def set_field(self, name: str, value: Any) -> FormSnapshot:
        if name not in self.schema:
            raise UnknownFieldError(name)

        with self._lock:
            if self._snapshot.status is FormStatus.SUBMITTED:
                raise FormClosedError("The form has already been submitted")
            if self._submitting:
                raise FormBusyError("The form is being submitted")

            self._record[name] = value
            self._snapshot = self._snapshot.model_copy(update={"record": dict(self._record)})
            return self._snapshot

    def submit(self) -> FormSnapshot:
        if not self._in_flight.acquire(blocking=False):
            logger.debug("submit ignored, another submit is in flight")
            return self._snapshot

        try:
            with self._lock:
                if self._snapshot.status is FormStatus.SUBMITTED:
                    return self._snapshot
                record = dict(self._record)
                self._submitting = True

            result = None
            try:
                result = SubmitState.model_validate(self.graph.invoke({"record": record}))
            finally:
                with self._lock:
                    if result is not None:
                        self._snapshot = FormSnapshot(
                            status=result.status,
                            record=record,
                            errors=dict(result.errors),
                            notice=result.notice,
                        )
                    self._submitting = False

            logger.debug(
                "submit -> %s (%d field errors)", result.status.value, len(result.errors)
            )
            return self._snapshot
        finally:
            self._in_flight.release()

    def reset(self) -> FormSnapshot:
        with self._lock:
            if self._submitting:
                raise FormBusyError("The form is being submitted")
            self._record = {}
            self._snapshot = FormSnapshot()
            return self._snapshot

    def error_for(self, name: str) -> Optional[str]:
        return self._snapshot.errors.get(name)

    def errors_by_element_id(self) -> Dict[str, str]:
        return {
            self.schema.field(name).error_id: message
            for name, message in self._snapshot.errors.items()
        }
