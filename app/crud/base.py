from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from pydantic import BaseModel
from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    """
    Generic CRUD class with shop isolation via explicit shop_domain.
    
    Every query filters by shop_domain in addition to the primary key.
    The shop domain is always passed explicitly from the router layer.
    
    Type Parameters:
        ModelType: SQLAlchemy model class (must have id, shop_domain, created_at)
        CreateSchemaType: Pydantic schema for creating records
    """
    
    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD object with model class.
        
        Args:
            model: SQLAlchemy model class
        """
        self.model = model
    
    def get(self, db: Session, id: int, shop_domain: str) -> Optional[ModelType]:
        """
        Retrieve a single record by ID with shop filtering.
        
        Args:
            db: Database session
            id: Record ID
            shop_domain: Shop domain for isolation
            
        Returns:
            Model instance or None if not found or doesn't belong to the shop
        """
        stmt = select(self.model).where(
            self.model.id == id,
            self.model.shop_domain == shop_domain
        )
        result = db.execute(stmt)
        return result.scalar_one_or_none()
    
    def get_multi(self, db: Session, *, shop_domain: str) -> List[ModelType]:
        """
        Retrieve all records of a shop, newest first.
        
        Args:
            db: Database session
            shop_domain: Shop domain for isolation
            
        Returns:
            List of model instances belonging to the shop
        """
        stmt = select(self.model).where(
            self.model.shop_domain == shop_domain
        ).order_by(self.model.created_at.desc(), self.model.id.desc())
        result = db.execute(stmt)
        return list(result.scalars().all())
    
    def create(
        self,
        db: Session,
        *,
        obj_in: CreateSchemaType | Dict[str, Any],
        shop_domain: str
    ) -> ModelType:
        """
        Create a new record owned by a shop.
        
        Args:
            db: Database session
            obj_in: Pydantic schema or dict with creation data
            shop_domain: Shop domain for isolation
            
        Returns:
            Created model instance
        """
        obj_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(shop_domain=shop_domain, **obj_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
    
    def update(
        self,
        db: Session,
        *,
        id: int,
        shop_domain: str,
        obj_in: CreateSchemaType | Dict[str, Any]
    ) -> bool:
        """
        Overwrite the given fields of a record, conditioned on ownership.
        
        The UPDATE itself carries the shop filter, so a record deleted or
        never owned by the shop is simply not matched.
        
        Args:
            db: Database session
            id: Record ID
            shop_domain: Shop domain for isolation
            obj_in: Pydantic schema or dict with the new field values
            
        Returns:
            True if a row was updated, False if nothing matched
        """
        values = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        stmt = update(self.model).where(
            self.model.id == id,
            self.model.shop_domain == shop_domain
        ).values(**values)
        result = db.execute(stmt)
        db.commit()
        return result.rowcount > 0
    
    def delete(self, db: Session, *, id: int, shop_domain: str) -> bool:
        """
        Delete a record by ID with shop filtering.
        
        Args:
            db: Database session
            id: Record ID to delete
            shop_domain: Shop domain for isolation
            
        Returns:
            True if a row was deleted, False if nothing matched
        """
        stmt = delete(self.model).where(
            self.model.id == id,
            self.model.shop_domain == shop_domain
        )
        result = db.execute(stmt)
        db.commit()
        return result.rowcount > 0
