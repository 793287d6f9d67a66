"""
File Links API service layer

Operations on file records and the pre-signed links that go with them.
"""

from .file_service import DeleteResult, DeleteStatus, FileService, get_file_service

__all__ = [
    'FileService', 'get_file_service',
    'DeleteResult', 'DeleteStatus',
]
