"""Services - история команд и сериализация настроек."""
