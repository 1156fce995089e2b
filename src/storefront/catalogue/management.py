"""Product administration: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    stock: Integer(min_value=0)
    category: String(max_length=100)
    image: Text()


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    stock: Integer(min_value=0)
    category: String(max_length=100)
    image: Text()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _editable_values(command):
    return {
        "name": command.name,
        "description": command.description,
        "price": command.price,
        "stock": command.stock,
        "category": command.category,
        "image": command.image,
    }


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(**_editable_values(command))
        current_domain.repository_for(Product).add(product)
        logger.info("product_created", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update(**_editable_values(command))
        repo.add(product)
        logger.info("product_updated", product_id=str(product.id))
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        # Carts and orders keep their references; readers resolve them to None
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(command.product_id))
