"""
Django settings for the Django REST in Style project.

Every deployment value is read from the environment. Variables are loaded
from backend/.env when present; see .env.example for the full list.
"""
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

from core import environment as env

# Build paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables (process environment wins over the file)
load_dotenv(BASE_DIR / '.env', override=False)

ENVIRONMENT = env.get_str('ENVIRONMENT', 'development')
if not env.validate_environment(ENVIRONMENT):
    raise ImproperlyConfigured(
        f"ENVIRONMENT must be one of {', '.join(env.get_all_environments())}, "
        f"got '{ENVIRONMENT}'"
    )

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env.get_secret('SECRET_KEY')
if SECRET_KEY is None:
    if ENVIRONMENT == 'production':
        raise ImproperlyConfigured('SECRET_KEY must be set in production')
    SECRET_KEY = 'django-insecure-change-this-in-production'

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env.get_bool('DEBUG', default=False)

ALLOWED_HOSTS = env.get_list('ALLOWED_HOSTS', ['localhost', '127.0.0.1', '0.0.0.0'])

# Application definition
DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'rest_framework',
    'rest_framework.authtoken',
    'corsheaders',
    'drf_spectacular',
]

LOCAL_APPS = [
    'core',
    'books',
    'conventions',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'
ASGI_APPLICATION = 'core.asgi.application'

# Database
DATABASES = {
    'default': env.get_database_config(ENVIRONMENT),
}

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

if ENVIRONMENT == 'test':
    # Speed up password hashing in tests
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = env.get_str('TIME_ZONE', 'UTC')
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = '/static/'
STATIC_ROOT = Path(env.get_str('STATIC_ROOT', str(BASE_DIR / 'staticfiles')))

# Media files
MEDIA_URL = '/media/'
MEDIA_ROOT = Path(env.get_str('MEDIA_ROOT', str(BASE_DIR / 'media')))

# Which core.storage backend model file fields use: 'default' or 'overwrite'
MEDIA_STORAGE = env.get_str('MEDIA_STORAGE', 'default')

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'books.authentication.BearerTokenAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticatedOrReadOnly',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PAGINATION_CLASS': 'rest_framework.pagination.PageNumberPagination',
    'PAGE_SIZE': env.get_int('PAGE_SIZE', 20),
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'EXCEPTION_HANDLER': 'core.exceptions.api_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'Django REST in Style API',
    'DESCRIPTION': 'Exemplar books API and the convention catalog it follows.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
}

# CORS settings
CORS_ALLOWED_ORIGINS = env.get_list('CORS_ALLOWED_ORIGINS', ['http://localhost:3000'])
CORS_ALLOW_CREDENTIALS = True

# Logging
LOG_LEVEL = env.get_str('LOG_LEVEL', 'INFO').upper()
LOG_FILE = env.get_str('LOG_FILE')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    # App loggers only set the level; records reach the root handlers
    'loggers': {
        'books': {'level': LOG_LEVEL},
        'conventions': {'level': LOG_LEVEL},
        'core': {'level': LOG_LEVEL},
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
}

if LOG_FILE:
    Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    LOGGING['handlers']['file'] = {
        'level': LOG_LEVEL,
        'class': 'logging.FileHandler',
        'filename': LOG_FILE,
        'formatter': 'verbose',
    }
    LOGGING['root']['handlers'].append('file')
