"""Redis Key 命名规范。

Redis 用于：
- 用户级数据：视频源列表、设置
- 分类页码记忆：category_{type_id}_page
"""


class RedisKeys:
    """Redis Key 命名空间管理。"""

    # 用户数据
    # user:{user_id}:{name}
    USER_PREFIX = "user"

    # 分类页码
    # listing:{scope}:category_{type_id}_page
    LISTING_PREFIX = "listing"

    HEALTH_CHECK_KEY = "health:ping"

    @classmethod
    def user_data(cls, user_id: str, name: str) -> str:
        """生成用户级数据 key。

        Args:
            user_id: 用户 ID（X-User-Id）
            name: 数据名称（如 video-apis, settings）

        Returns:
            格式化的 Redis key
        """
        return f"{cls.USER_PREFIX}:{user_id}:{name}"

    @classmethod
    def category_page(cls, scope: str, type_id: int) -> str:
        """生成分类当前页码 key。"""
        return f"{cls.LISTING_PREFIX}:{scope}:category_{type_id}_page"

    @classmethod
    def category_page_count(cls, scope: str, type_id: int) -> str:
        """生成分类总页数 key。"""
        return f"{cls.LISTING_PREFIX}:{scope}:category_{type_id}_pagecount"
