# rabat_landmarks/exceptions.py
"""
ストア層の例外．API層（routers）でHTTPレスポンスに変換される．
"""


class StoreError(Exception):
    """ストア操作の失敗の基底クラス"""


class LandmarkNotFoundError(StoreError):
    """スラッグに一致するランドマークが無い．"""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Landmark not found: {slug}")


class ValidationError(StoreError):
    """必須属性の欠落など，呼び出し側の契約違反．"""

    def __init__(self, message: str, errors: list | None = None):
        self.errors = errors or []
        super().__init__(message)


class BackingUnavailableError(StoreError):
    """永続ストア（RDB）に到達できない．"""


class DuplicateError(StoreError):
    """一意制約違反"""


class DuplicateSlugError(DuplicateError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Landmark slug already exists: {slug}")


class DuplicateUsernameError(DuplicateError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already exists: {username}")
