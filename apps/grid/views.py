from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse, JsonResponse
from django.views import View
from rest_framework.exceptions import ValidationError

from apps.grid.conf import grid_settings
from apps.grid.context import RequestContext


class GridView(View):
    """
    GET view over a grid.

    Renders ``template_name`` with the prepared grid, or answers with the
    grid's array as JSON when the request is an AJAX grid request.
    """

    grid_class = None
    template_name = None
    renderer_class = None

    def get_grid_class(self):
        if self.grid_class is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} requires a definition of 'grid_class'."
            )
        return self.grid_class

    def get_renderer(self):
        renderer_class = self.renderer_class or grid_settings.RENDERER_CLASS
        return renderer_class()

    def get_grid_kwargs(self) -> dict:
        return {}

    def get_grid(self, context: RequestContext):
        grid_class = self.get_grid_class()
        kwargs = self.get_grid_kwargs()
        if grid_class.renderer_class is None:
            kwargs.setdefault("renderer", self.get_renderer())
        return grid_class(context, **kwargs)

    def get(self, request, *args, **kwargs):
        context = RequestContext.from_request(request)
        grid = self.get_grid(context)

        try:
            grid.prepare_grid()
        except ValidationError as exc:
            # invalid filter input, reported the way DRF reports it
            return JsonResponse(exc.detail, status=400, safe=False)

        if grid.is_ajax():
            return grid.ajax_response()

        if self.template_name is None:
            return HttpResponse(grid.render_grid())
        return HttpResponse(grid.render(self.template_name))
