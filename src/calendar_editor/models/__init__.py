"""Models - доменные модели и модели конфигурации."""
