# core/i18n — one module per language, each exposing a `translations` dict.
