from sqlalchemy import Column, Integer, String, Float, TIMESTAMP
from sqlalchemy.sql import func
from wallet_api.database import Base


class Wallet(Base):
    __tablename__ = "user_wallet"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    user_name = Column(String(255), nullable=False, default="")
    wallet_name = Column(String(255), nullable=False, default="")
    wallet_type = Column(String(100), nullable=False, default="")
    balance = Column(Float, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Wallet(id={self.id}, user_id={self.user_id}, wallet_type={self.wallet_type})>"
