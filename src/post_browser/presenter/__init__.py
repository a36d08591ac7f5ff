"""
Presenter Module

View models for the post list and post detail screens.
"""

from .command import Command
from .detail_presenter import PostDetailPresenter
from .list_presenter import PostListPresenter
from .observable import CollectionChange, ObservableCollection

__all__ = [
    "Command",
    "CollectionChange",
    "ObservableCollection",
    "PostDetailPresenter",
    "PostListPresenter",
]
