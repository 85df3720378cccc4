"""SQLAlchemy-backed Category repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.repository import NotFoundError
from catalog.core.value_objects import Uuid
from catalog.domain.category import Category
from catalog.domain.category_repository import CategoryRepository
from catalog.infra.category_mapper import CategoryModelMapper
from catalog.infra.logging import get_logger
from catalog.models.category import CategoryModel
from catalog.schemas.search import SearchParams, SearchResult

logger = get_logger(__name__)


class CategorySqlAlchemyRepository(CategoryRepository):
    """Category repository on an async SQLAlchemy session.

    Writes are flushed, not committed; the owner of the session (usually
    ``get_db_session``) decides when to commit. Database errors propagate
    unchanged, only missing rows are reported as ``NotFoundError``.

    Usage:
        async with get_db_session() as session:
            repository = CategorySqlAlchemyRepository(session)
            await repository.insert(Category.create(name="Movie"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: Active async session
        """
        self._session = session

    async def insert(self, entity: Category) -> None:
        self._session.add(CategoryModelMapper.to_model(entity))
        await self._session.flush()
        logger.debug("Category inserted", category_id=entity.category_id.id)

    async def bulk_insert(self, entities: list[Category]) -> None:
        self._session.add_all([CategoryModelMapper.to_model(e) for e in entities])
        await self._session.flush()
        logger.debug("Categories inserted", count=len(entities))

    async def update(self, entity: Category) -> None:
        """Overwrite the stored row with the aggregate state.

        Raises:
            NotFoundError: If no row has the aggregate's identity
        """
        category_id = entity.category_id.id
        if await self._get_model(category_id) is None:
            raise NotFoundError(category_id, self.get_entity())

        await self._session.merge(CategoryModelMapper.to_model(entity))
        await self._session.flush()
        logger.debug("Category updated", category_id=category_id)

    async def delete(self, entity_id: Uuid) -> None:
        """Delete the row with ``entity_id``.

        Raises:
            NotFoundError: If no row has that identity
        """
        model = await self._get_model(entity_id.id)
        if model is None:
            raise NotFoundError(entity_id.id, self.get_entity())

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Category deleted", category_id=entity_id.id)

    async def find_by_id(self, entity_id: Uuid) -> Category | None:
        model = await self._get_model(entity_id.id)
        return CategoryModelMapper.to_entity(model) if model else None

    async def find_all(self) -> list[Category]:
        result = await self._session.execute(select(CategoryModel))
        return [CategoryModelMapper.to_entity(model) for model in result.scalars()]

    async def search(self, props: SearchParams) -> SearchResult[Category]:
        """Filter, sort and paginate in SQL.

        Matches ``props.filter`` case-insensitively against the name, sorts by
        an allow-listed column or newest first, and counts matches before
        applying OFFSET/LIMIT.
        """
        query = select(CategoryModel)
        if props.filter:
            query = query.where(CategoryModel.name.icontains(props.filter, autoescape=True))

        total = await self._session.scalar(
            select(func.count()).select_from(query.subquery())
        )

        if props.sort and props.sort in self.sortable_fields:
            column = getattr(CategoryModel, props.sort)
            order = column.desc() if props.sort_dir == "desc" else column.asc()
        else:
            order = CategoryModel.created_at.desc()

        offset = (props.page - 1) * props.per_page
        result = await self._session.execute(
            query.order_by(order).offset(offset).limit(props.per_page)
        )
        items = [CategoryModelMapper.to_entity(model) for model in result.scalars()]

        logger.debug(
            "Category search",
            filter=props.filter,
            sort=props.sort,
            sort_dir=props.sort_dir,
            page=props.page,
            per_page=props.per_page,
            total=total,
        )

        return SearchResult(
            items=items,
            total=total or 0,
            current_page=props.page,
            per_page=props.per_page,
        )

    async def _get_model(self, category_id: str) -> CategoryModel | None:
        return await self._session.get(CategoryModel, category_id)
