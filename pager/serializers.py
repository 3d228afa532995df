# PW/pager/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PW/pager/serializers.py
# Назначение: DRF-сериализаторы окна пагинации (вход — query-параметры, выход — JSON)
# ─────────────────────────────────────────────────────────────────────────────

from typing import Any, Dict  # типы для подсказок
from rest_framework import serializers  # импорт базового сериализатора

from .conf import get_max_window  # потолок размеров окон
from .services.pagination import PageWindow  # окно пагинации

# Параметры, задающие размер окна (в страницах или десятках)
SIZE_FIELDS = (
    "window", "inner_window", "outer_window",
    "left", "right",
    "decade", "decade_left", "decade_right",
)


class PageWindowQuerySerializer(serializers.Serializer):
    """Query-параметры ?total_pages=&current_page=&window=… (незаданные не попадают в validated_data)."""
    total_pages = serializers.IntegerField(min_value=0, required=False)   # всего страниц
    num_pages = serializers.IntegerField(min_value=0, required=False)     # синоним total_pages
    current_page = serializers.IntegerField(required=False)               # вне диапазона — зажмём, не ошибка
    window = serializers.IntegerField(min_value=0, required=False)        # внутреннее окно
    inner_window = serializers.IntegerField(min_value=0, required=False)  # синоним window
    outer_window = serializers.IntegerField(min_value=0, required=False)  # внешние окна
    left = serializers.IntegerField(min_value=0, required=False)          # левое внешнее (0 → outer_window)
    right = serializers.IntegerField(min_value=0, required=False)         # правое внешнее (0 → outer_window)
    decade = serializers.IntegerField(min_value=0, required=False)        # декады
    decade_left = serializers.IntegerField(min_value=0, required=False)   # левая декада (0 → decade)
    decade_right = serializers.IntegerField(min_value=0, required=False)  # правая декада (0 → decade)

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        """Без числа страниц окно не посчитать; размеры окон — не больше PAGER["MAX_WINDOW"]."""
        if attrs.get("total_pages") is None and attrs.get("num_pages") is None:
            raise serializers.ValidationError({"total_pages": "Обязательный параметр."})

        limit = get_max_window()  # ручка публичная: стоимость ответа растёт с размером окна
        too_wide = {
            name: f"Не больше {limit}."
            for name in SIZE_FIELDS
            if attrs.get(name) is not None and attrs[name] > limit
        }
        if too_wide:
            raise serializers.ValidationError(too_wide)
        return attrs


class PageProxySerializer(serializers.Serializer):
    """Одна страница окна с полным набором флагов классификации."""
    number = serializers.IntegerField(read_only=True)          # номер страницы
    current = serializers.BooleanField(read_only=True)         # текущая
    first = serializers.BooleanField(read_only=True)           # первая
    last = serializers.BooleanField(read_only=True)            # последняя
    prev = serializers.BooleanField(read_only=True)            # предыдущая к текущей
    next = serializers.BooleanField(read_only=True)            # следующая к текущей
    left_outer = serializers.BooleanField(read_only=True)      # в левом внешнем окне
    right_outer = serializers.BooleanField(read_only=True)     # в правом внешнем окне
    inside_window = serializers.BooleanField(read_only=True)   # во внутреннем окне
    left_decade = serializers.BooleanField(read_only=True)     # в левой декаде
    right_decade = serializers.BooleanField(read_only=True)    # в правой декаде


class PageWindowSerializer(serializers.Serializer):
    """Окно целиком: разрешённая конфигурация, страницы и записи с разрывами."""
    total_pages = serializers.IntegerField(source="config.total_pages", read_only=True)
    current_page = serializers.IntegerField(source="config.current_page", read_only=True)
    window = serializers.IntegerField(source="config.window", read_only=True)
    left = serializers.IntegerField(source="config.left", read_only=True)
    right = serializers.IntegerField(source="config.right", read_only=True)
    decade_left = serializers.IntegerField(source="config.decade_left", read_only=True)
    decade_right = serializers.IntegerField(source="config.decade_right", read_only=True)
    should_render = serializers.BooleanField(read_only=True)   # рисовать ли контролы вообще
    pages = serializers.SerializerMethodField()
    entries = serializers.SerializerMethodField()

    def get_pages(self, obj: PageWindow) -> list:
        return PageProxySerializer(list(obj), many=True).data

    def get_entries(self, obj: PageWindow) -> list:
        """Страницы и разрывы в порядке вывода: {"type": "page", ...} / {"type": "gap", ...}."""
        out = []
        for entry in obj.entries():
            if entry.is_gap:
                out.append({"type": "gap", "start": entry.start, "end": entry.end})
            else:
                out.append({"type": "page", **PageProxySerializer(entry).data})
        return out
