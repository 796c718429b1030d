"""
Paginated, renderable grids over querysets.

A grid is built for one request from a ``RequestContext`` and prepared by
running its ``stages`` in order:

1. ``prepare_query``       base queryset
2. ``prepare_filters``     filter backends (django-filter, search)
3. ``prepare_pagination``  count, sort, page state, column selection, fetch
4. ``prepare_renderer``    bind the renderer to the fetched items

Concrete grids declare their queryset, filters, ordering and serializer the
same way DRF views do and implement ``to_array``.
"""

import json
import logging

from django.core.exceptions import ImproperlyConfigured
from django.core.serializers.json import DjangoJSONEncoder
from django.db.models import QuerySet
from django.forms.models import model_to_dict
from django.http import JsonResponse
from django.template.loader import render_to_string
from rest_framework.filters import OrderingFilter
from rest_framework.settings import api_settings

from apps.grid.conf import grid_settings
from apps.grid.pagination import PaginationState, build_url, resolve_page, resolve_per_page

logger = logging.getLogger(__name__)

ALL_COLUMNS = "*"


class Grid:
    queryset = None
    columns = ALL_COLUMNS

    filter_backends = api_settings.DEFAULT_FILTER_BACKENDS
    filterset_class = None
    search_fields = None

    ordering_backend = OrderingFilter
    ordering_fields = None
    ordering = None

    serializer_class = None
    renderer_class = None

    stages = (
        "prepare_query",
        "prepare_filters",
        "prepare_pagination",
        "prepare_renderer",
    )

    def __init__(self, context, queryset=None, renderer=None, view_engine=None):
        self.context = context
        if queryset is not None:
            self.queryset = queryset
        self.renderer = renderer
        self.view_engine = view_engine or render_to_string

        self.page = grid_settings.PAGE
        self.per_page = grid_settings.PER_PAGE
        self.per_page_selection = list(grid_settings.PER_PAGE_SELECTION)

        self._fragment = None
        self._base_url = None
        self._extra_parameters = {}

        self.state = None
        self.items = []
        self._working_queryset = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_queryset(self, queryset):
        self.queryset = queryset
        return self

    def get_queryset(self):
        """
        Base queryset of the grid. Re-evaluated on every preparation pass.
        """
        if self.queryset is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} is missing a QuerySet. Define "
                f"{self.__class__.__name__}.queryset, pass queryset= or "
                f"override {self.__class__.__name__}.get_queryset()."
            )

        queryset = self.queryset
        if isinstance(queryset, QuerySet):
            queryset = queryset.all()
        return queryset

    def set_columns(self, columns):
        self.columns = columns
        return self

    def get_columns(self):
        return self.columns

    def set_renderer(self, renderer):
        self.renderer = renderer
        return self

    def get_renderer(self):
        if self.renderer is None and self.renderer_class is not None:
            self.renderer = self.renderer_class()
        return self.renderer

    def set_page(self, page):
        self.page = page
        return self

    def get_page(self) -> int:
        """
        Current page: the explicitly set page when valid, else the request's.
        """
        if self.page is not None:
            return resolve_page(self.page, resolve_page(self._requested_page()))
        return resolve_page(self._requested_page())

    def _requested_page(self):
        return self.context.get(grid_settings.PAGE_PARAM)

    def set_per_page(self, per_page):
        self.per_page = per_page
        return self

    def get_per_page(self) -> int:
        """
        Page size requested by the caller if valid, else the configured one.
        """
        requested = self.context.get(grid_settings.PER_PAGE_PARAM)
        return resolve_per_page(requested, resolve_per_page(self.per_page, grid_settings.PER_PAGE))

    def set_per_page_selection(self, per_page_selection):
        self.per_page_selection = list(per_page_selection)
        return self

    def get_per_page_selection(self):
        return self.per_page_selection

    def set_fragment(self, fragment):
        self._fragment = fragment
        if self.state is not None:
            self.state.fragment = fragment
        return self

    @property
    def fragment(self):
        return self._fragment

    def set_base_url(self, url):
        self._base_url = url
        if self.state is not None:
            self.state.base_url = url
        return self

    def get_base_url(self) -> str:
        return self._base_url or self.context.path

    def add_parameter(self, key, value):
        """
        Add a query string value to the page links.
        """
        self._extra_parameters[key] = value
        if self.state is not None:
            self.state.parameters[key] = value
        return self

    # ------------------------------------------------------------------
    # Preparation pipeline
    # ------------------------------------------------------------------

    def prepare_grid(self):
        for stage in self.stages:
            getattr(self, stage)()

        logger.debug(
            "Prepared %s: page %s/%s, %s of %s rows",
            self.__class__.__name__,
            self.state.current_page,
            self.state.last_page,
            len(self.items),
            self.state.total_count,
        )
        return self

    def prepare_query(self):
        self._working_queryset = self.get_queryset()

    def prepare_filters(self):
        self._working_queryset = self.filter_queryset(self._working_queryset)

    def filter_queryset(self, queryset):
        for backend in list(self.filter_backends):
            queryset = backend().filter_queryset(self.context.request, queryset, self)
        return queryset

    def prepare_pagination(self):
        queryset = self._working_queryset

        self.state = self.build_state()
        self.state.set_total_count(queryset.count())
        self.state.clamp()

        queryset = self.sort_queryset(queryset)
        queryset = self.select_columns(queryset)

        offset, limit = self.state.offset, self.state.limit
        self.items = list(queryset[offset:offset + limit])

    def build_state(self) -> PaginationState:
        return PaginationState(
            current_page=self.get_page(),
            per_page=self.get_per_page(),
            per_page_choices=list(self.per_page_selection),
            fragment=self._fragment,
            base_url=self.get_base_url(),
            parameters={**self.context.parameters(), **self._extra_parameters},
            page_param=grid_settings.PAGE_PARAM,
        )

    def sort_queryset(self, queryset):
        if self.ordering_backend is None:
            return queryset

        if self.ordering_fields is None and self.get_serializer_class() is None:
            if self.ordering:
                ordering = self.ordering
                if isinstance(ordering, str):
                    ordering = (ordering,)
                return queryset.order_by(*ordering)
            return queryset

        return self.ordering_backend().filter_queryset(self.context.request, queryset, self)

    def select_columns(self, queryset):
        columns = self.get_columns()
        if columns == ALL_COLUMNS or not columns:
            return queryset
        if isinstance(columns, str):
            columns = (columns,)
        return queryset.values(*columns)

    def prepare_renderer(self):
        renderer = self.get_renderer()
        if renderer is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} has no renderer. Pass renderer= "
                f"or define {self.__class__.__name__}.renderer_class."
            )
        renderer.bind(self, self.items)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def get_items(self):
        return self.items

    @property
    def total_count(self) -> int:
        return self.state.total_count if self.state is not None else 0

    def __len__(self):
        return self.total_count

    def get_display_columns(self):
        columns = self.get_columns()
        if columns and columns != ALL_COLUMNS:
            return [columns] if isinstance(columns, str) else list(columns)
        model = getattr(self.get_queryset(), "model", None)
        if model is not None:
            return [field.name for field in model._meta.concrete_fields]
        if self.items and isinstance(self.items[0], dict):
            return list(self.items[0])
        return []

    def get_rows(self):
        columns = self.get_display_columns()
        rows = []
        for item in self.items:
            if isinstance(item, dict):
                rows.append([item.get(column) for column in columns])
            else:
                rows.append([getattr(item, column, None) for column in columns])
        return rows

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def create_url(self, parameters=None) -> str:
        """
        URL of the current page with ``parameters`` merged over the request's.
        """
        return build_url(
            self.get_base_url(),
            self.context.parameters(),
            parameters,
            self._fragment,
        )

    def per_page_url(self, per_page) -> str:
        return self.create_url({grid_settings.PER_PAGE_PARAM: per_page})

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_grid(self) -> str:
        renderer = self.get_renderer()
        if renderer is None:
            raise ImproperlyConfigured(f"{self.__class__.__name__} has no renderer.")
        return renderer.render()

    def pagination(self, template_name=None) -> str:
        """
        Rendered page links.
        """
        return self.view_engine(
            template_name or grid_settings.PAGINATION_TEMPLATE,
            {"grid": self, "state": self.state},
            request=self.context.http_request,
        )

    def render(self, template_name) -> str:
        return self.view_engine(
            template_name,
            {"grid": self},
            request=self.context.http_request,
        )

    def is_ajax(self) -> bool:
        return self.context.is_ajax()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def get_serializer_class(self):
        return self.serializer_class

    def get_serializer_context(self) -> dict:
        return {"request": self.context.request, "grid": self}

    def serialize_items(self) -> list:
        columns = self.get_columns()
        if columns and columns != ALL_COLUMNS:
            return [dict(item) for item in self.items]

        serializer_class = self.get_serializer_class()
        if serializer_class is None:
            return [model_to_dict(item) for item in self.items]

        serializer = serializer_class(
            self.items, many=True, context=self.get_serializer_context()
        )
        return list(serializer.data)

    def pagination_payload(self) -> dict:
        state = self.state
        return {
            "total": state.total_count,
            "per_page": state.per_page,
            "current_page": state.current_page,
            "last_page": state.last_page,
            "from": state.first_item,
            "to": state.last_item,
        }

    def to_array(self):
        raise NotImplementedError(".to_array() must be overridden.")

    def to_json(self, **options) -> str:
        options.setdefault("cls", DjangoJSONEncoder)
        return json.dumps(self.to_array(), **options)

    def ajax_response(self) -> JsonResponse:
        return JsonResponse(self.to_array(), safe=False)
