# PW/PW/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PW/PW/settings.py
# Назначение: глобальные настройки проекта Django + дефолты окна пагинации (PAGER)
# Принципы: секреты и флаги берём из .env, всё остальное — явные значения ниже
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта (папка PW). Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Если ключ не найден, сразу падаем с понятной ошибкой — без него запуск небезопасен
if not SECRET_KEY:
    raise ValueError("❌ SECRET_KEY не найден в .env! Установите KEY_DJ.")

# Флаг режима разработки. Включается явно: DJANGO_DEBUG=1.
DEBUG = os.getenv("DJANGO_DEBUG", "0") == "1"

# Список разрешённых хостов. В Dev пустой, в проде — через DJANGO_ALLOWED_HOSTS.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.auth",             # система аутентификации (нужна DRF)
    "django.contrib.contenttypes",     # контент-тайпы
    "django.contrib.staticfiles",      # статика для Browsable API
    "rest_framework",                  # DRF — API фреймворк
    "pager.apps.PagerConfig",          # окно пагинации: сервисы, тег, API
]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# ── Урлы и шаблоны ───────────────────────────────────────────────────────────

ROOT_URLCONF = "PW.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст
            ],
        },
    },
]

# ── База данных ──────────────────────────────────────────────────────────────
# Моделей у pager нет; SQLite нужен только contrib-приложениям.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",    # движок БД
        "NAME": BASE_DIR / "db.sqlite3",           # путь до файла SQLite
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"       # язык интерфейса
TIME_ZONE = "Europe/Moscow"   # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в UTC

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: публичное read-only API без сессий ─────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],                  # окно считается без пользователя
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,                          # не трогаем contrib.auth на каждый запрос
}

# ── Окно пагинации: дефолты процесса ────────────────────────────────────────
# Ноль в LEFT/RIGHT означает «взять OUTER_WINDOW», в DECADE_* — «взять DECADE».
PAGER = {
    "WINDOW": 4,          # радиус внутреннего окна вокруг текущей страницы
    "OUTER_WINDOW": 1,    # внешние окна в начале/конце
    "LEFT": 0,            # 0 → OUTER_WINDOW
    "RIGHT": 0,           # 0 → OUTER_WINDOW
    "DECADE": 0,          # «круглые» страницы (десятками), 0 — выключено
    "DECADE_LEFT": 0,     # 0 → DECADE
    "DECADE_RIGHT": 0,    # 0 → DECADE
    "MAX_WINDOW": 50,     # потолок размеров окон в query публичного API
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pager": {
            "handlers": ["console"],
            "level": os.getenv("PAGER_LOG_LEVEL", "INFO"),  # DEBUG покажет clamp и подстановки нулей
            "propagate": True,
        },
    },
}
