"""Demo data: sample accounts, a small catalogue and one shopper's history.

Test accounts:
    admin@ecommerce.tn / admin123  (admin)
    user1@test.tn      / user123
    user2@test.tn      / user123

Must run inside a domain context.
"""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.identity.user import Role, User
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.order import Order, OrderStatus
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_USERS = [
    {"username": "admin", "email": "admin@ecommerce.tn", "password": "admin123", "role": Role.ADMIN.value},
    {"username": "user1", "email": "user1@test.tn", "password": "user123", "role": Role.USER.value},
    {"username": "user2", "email": "user2@test.tn", "password": "user123", "role": Role.USER.value},
]

DEMO_PRODUCTS = [
    {
        "name": "Laptop HP",
        "description": "Ordinateur portable HP 15.6 pouces, Intel Core i5, 8GB RAM",
        "price": 2499,
        "category": "Informatique",
        "stock": 15,
        "image": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=400",
    },
    {
        "name": "iPhone 14 Pro",
        "description": "Smartphone Apple iPhone 14 Pro, 256GB, Noir",
        "price": 4999,
        "category": "Téléphones",
        "stock": 8,
        "image": "https://images.unsplash.com/photo-1592286927505-b0e2e279d6fd?w=400",
    },
    {
        "name": "Samsung Galaxy S23",
        "description": "Smartphone Samsung Galaxy S23, 128GB, Blanc",
        "price": 3499,
        "category": "Téléphones",
        "stock": 12,
        "image": "https://images.unsplash.com/photo-1610945415295-d9bbf067e59c?w=400",
    },
    {
        "name": "AirPods Pro",
        "description": "Écouteurs sans fil Apple AirPods Pro avec réduction de bruit",
        "price": 899,
        "category": "Audio",
        "stock": 25,
        "image": "https://images.unsplash.com/photo-1606841837239-c5a1a4a07af7?w=400",
    },
    {
        "name": "Sony WH-1000XM5",
        "description": "Casque audio Sony avec réduction de bruit active",
        "price": 1299,
        "category": "Audio",
        "stock": 10,
        "image": "https://images.unsplash.com/photo-1545127398-14699f92334b?w=400",
    },
    {
        "name": "iPad Air",
        "description": "Tablette Apple iPad Air 10.9 pouces, 64GB, Gris sidéral",
        "price": 2199,
        "category": "Tablettes",
        "stock": 7,
        "image": "https://images.unsplash.com/photo-1544244015-0df4b3ffc6b0?w=400",
    },
    {
        "name": "Samsung Galaxy Tab S8",
        "description": "Tablette Samsung Galaxy Tab S8, 128GB avec S Pen",
        "price": 1899,
        "category": "Tablettes",
        "stock": 9,
        "image": "https://images.unsplash.com/photo-1585790050230-5dd28404f749?w=400",
    },
    {
        "name": "MacBook Pro 14",
        "description": "Apple MacBook Pro 14 pouces, M2 Pro, 16GB RAM, 512GB SSD",
        "price": 8999,
        "category": "Informatique",
        "stock": 5,
        "image": "https://images.unsplash.com/photo-1517336714731-489689fd1ca8?w=400",
    },
    {
        "name": "Dell XPS 13",
        "description": "Ultrabook Dell XPS 13, Intel Core i7, 16GB RAM, 512GB SSD",
        "price": 4499,
        "category": "Informatique",
        "stock": 6,
        "image": "https://images.unsplash.com/photo-1593642632823-8f785ba67e45?w=400",
    },
    {
        "name": "Apple Watch Series 8",
        "description": "Montre connectée Apple Watch Series 8, GPS + Cellular",
        "price": 1699,
        "category": "Montres",
        "stock": 14,
        "image": "https://images.unsplash.com/photo-1579586337278-3befd40fd17a?w=400",
    },
    {
        "name": "JBL Flip 6",
        "description": "Enceinte Bluetooth portable JBL Flip 6, étanche",
        "price": 449,
        "category": "Audio",
        "stock": 20,
        "image": "https://images.unsplash.com/photo-1608043152269-423dbba4e7e1?w=400",
    },
    {
        "name": "Logitech MX Master 3",
        "description": "Souris sans fil Logitech MX Master 3, haute précision",
        "price": 299,
        "category": "Accessoires",
        "stock": 30,
        "image": "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=400",
    },
]

SAMPLE_SHOPPER_EMAIL = "user1@test.tn"


def clear_store() -> None:
    """Delete every user, product, cart and order."""
    for aggregate in (Order, Cart, Product, User):
        current_domain.repository_for(aggregate)._dao.delete_all()
    logger.info("store_cleared")


def seed_users() -> dict[str, User]:
    repo = current_domain.repository_for(User)
    users = {}
    for data in DEMO_USERS:
        user = repo.find_by_email(data["email"])
        if user is None:
            user = User.register(**data)
            repo.add(user)
        users[user.email] = user
    return users


def seed_products() -> list[Product]:
    repo = current_domain.repository_for(Product)
    products = [Product.create(**data) for data in DEMO_PRODUCTS]
    for product in products:
        repo.add(product)
    return products


def seed_sample_history(user: User, products: list[Product]) -> None:
    """Give one shopper a cart with two products and a delivered order of three."""
    sample = products[:3]
    if not sample:
        logger.warning("seed_history_skipped", reason="no products")
        return

    cart_repo = current_domain.repository_for(Cart)
    cart = cart_repo.find_for_user(user.id) or Cart.create(user_id=user.id)
    for product in sample[:2]:
        cart.set_item(product_id=product.id, quantity=1)
    cart_repo.add(cart)

    order = Order.place(
        user_id=user.id,
        items=[(product.id, 2, product.price) for product in sample],
    )
    order.change_status(OrderStatus.DELIVERED.value)
    current_domain.repository_for(Order).add(order)


def seed_demo_data(reset: bool = False) -> None:
    """Load the demo data set. Skips everything if the catalogue already has products."""
    if reset:
        clear_store()
    elif current_domain.repository_for(Product).find_all():
        logger.info("seed_skipped", reason="catalogue not empty")
        return

    users = seed_users()
    products = seed_products()
    seed_sample_history(users[SAMPLE_SHOPPER_EMAIL], products)

    logger.info("seed_completed", users=len(users), products=len(products))
