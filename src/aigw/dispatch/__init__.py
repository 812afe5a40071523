"""Request dispatch: invoke one provider operation, normalize its outcome."""

from aigw.dispatch.dispatcher import RequestDispatcher
from aigw.dispatch.models import FileRequest

__all__ = ["FileRequest", "RequestDispatcher"]
