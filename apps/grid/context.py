"""
Request-scoped input for grids.

A grid never reaches for the current request on its own; the view builds a
``RequestContext`` and hands it to the grid.
"""

from django.http import HttpRequest
from rest_framework.request import Request

from apps.grid.conf import grid_settings


class RequestContext:
    """
    Read-only view of the request values a grid depends on.
    """

    def __init__(self, request: HttpRequest):
        self._request = request
        # DRF / django-filter backends expect a DRF request
        self.request = request if isinstance(request, Request) else Request(request)

    @classmethod
    def from_request(cls, request: HttpRequest) -> "RequestContext":
        return cls(request)

    @property
    def http_request(self) -> HttpRequest:
        return self.request._request

    @property
    def query_params(self):
        return self.request.query_params

    @property
    def path(self) -> str:
        return self.http_request.path

    def get(self, name: str, default=None):
        return self.query_params.get(name, default)

    def parameters(self, exclude=None) -> dict:
        """
        Current query parameters without the AJAX flag (or ``exclude``).
        """
        if exclude is None:
            exclude = (grid_settings.AJAX_PARAM,)
        return {
            key: value
            for key, value in self.query_params.items()
            if key not in exclude
        }

    def is_ajax(self) -> bool:
        """
        XMLHttpRequest header plus a truthy AJAX flag; only ``""`` and ``"0"``
        count as false.
        """
        requested_with = self.http_request.headers.get("X-Requested-With")
        if requested_with != "XMLHttpRequest":
            return False
        return self.get(grid_settings.AJAX_PARAM) not in (None, "", "0")
