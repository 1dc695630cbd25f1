from sqlalchemy import CheckConstraint, Column, Integer, LargeBinary, String
from inventory_app.db import Base

class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
        # AUTOINCREMENT keeps sqlite from handing out the id of a deleted last row again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Integer, nullable=False)
    picture = Column(LargeBinary, nullable=True)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
