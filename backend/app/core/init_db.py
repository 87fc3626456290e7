import logging

from sqlmodel import Session, select
from .database import engine
from .settings import settings
from ..models.Operator import Operator
from ..auth.service import get_password_hash

logger = logging.getLogger(__name__)

def init_db():
    with Session(engine) as session:
        statement = select(Operator).where(Operator.username == settings.ADMIN_USERNAME)
        operator = session.exec(statement).first()

        if not operator:
            logger.info("Creating initial operator: %s", settings.ADMIN_USERNAME)
            operator = Operator(
                username=settings.ADMIN_USERNAME,
                hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
                is_active=True,
            )
            session.add(operator)
            session.commit()
        else:
            logger.info("Initial operator already exists.")
