from .file_source import STDIN, FileLineSource

__all__ = ['STDIN', 'FileLineSource']
