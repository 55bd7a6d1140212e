"""Register expo-color-space-plugin in an Expo project's config file."""

__version__ = "1.0.0"
