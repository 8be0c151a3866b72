"""Product and article repository services."""

from typing import Optional

from ..entities import Product, Article, ProductFilter, ArticleFilter
from ..query import Predicate, product_predicate, article_predicate
from ..schemas import ProductCreate, ProductUpdate, ArticleCreate, ArticleUpdate
from ...config import PRODUCTS_COLLECTION, ARTICLES_COLLECTION
from .entity_service import EntityService


class ProductService(EntityService[Product, ProductFilter]):
    """Products: filter by category, tags, free text and price range."""

    collection_name = PRODUCTS_COLLECTION
    entity_type = Product
    filter_type = ProductFilter
    create_schema = ProductCreate
    update_schema = ProductUpdate

    def build_predicate(self, filter: Optional[ProductFilter]) -> Predicate:
        return product_predicate(filter)


class ArticleService(EntityService[Article, ArticleFilter]):
    """Articles: filter by category, tags and free text."""

    collection_name = ARTICLES_COLLECTION
    entity_type = Article
    filter_type = ArticleFilter
    create_schema = ArticleCreate
    update_schema = ArticleUpdate

    def build_predicate(self, filter: Optional[ArticleFilter]) -> Predicate:
        return article_predicate(filter)
