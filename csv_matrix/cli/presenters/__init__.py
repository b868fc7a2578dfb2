from .table_presenter import TablePresenter

__all__ = ["TablePresenter"]
