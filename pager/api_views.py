# PW/pager/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PW/pager/api_views.py
# Назначение: DRF-ручка окна пагинации для JS-рендеров
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations  # поддержка современных аннотаций

import logging  # логирование отклонённых запросов

from rest_framework import status  # HTTP-коды
from rest_framework.decorators import api_view  # функция → DRF-view
from rest_framework.request import Request  # DRF-запрос
from rest_framework.response import Response  # DRF-ответ

from .serializers import PageWindowQuerySerializer, PageWindowSerializer  # вход/выход
from .services.window_config import InvalidConfiguration, WindowConfig  # конфигурация окна
from .services.pagination import PageWindow  # окно пагинации

logger = logging.getLogger(__name__)


@api_view(["GET"])
def api_page_window(request: Request) -> Response:
    """GET ?total_pages=&current_page=&window=… → окно с классификацией страниц."""
    query = PageWindowQuerySerializer(data=request.query_params)  # валидируем query-параметры
    try:
        if not query.is_valid():
            logger.warning("Rejected page window query %s: %s", dict(request.query_params), query.errors)
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)
        config = WindowConfig.from_options(**query.validated_data)  # дефолты — из settings.PAGER
    except InvalidConfiguration as exc:
        # сюда попадаем, если битые дефолты процесса, а не запрос
        logger.warning("Page window config failed: %s", exc)
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PageWindowSerializer(PageWindow(config)).data)  # отдаём окно
