"""Domain -> DTO mapping shared by the handlers."""

from __future__ import annotations

from techstore.application.dto import (
    AppointmentDTO,
    CartDTO,
    CartLineDTO,
    OrderDTO,
    ProductDTO,
)
from techstore.domain.model.appointment import Appointment
from techstore.domain.model.cart import Cart
from techstore.domain.model.order import Order
from techstore.domain.model.product import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        category=product.category.value,
        rating=f"{product.rating:.1f}",
        stock=product.stock,
        specs=list(product.specs),
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                product_id=line.product_id,
                name=line.product.name,
                quantity=line.quantity.value,
                unit_price=str(line.product.price),
                line_total=str(line.line_total),
            )
            for line in cart.lines
        ],
        count=cart.count(),
        total=str(cart.total()),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        buyer_name=order.buyer.name,
        payment_method=order.buyer.payment_method.value,
        item_count=order.item_count,
        total=str(order.total),
        created_at=order.timestamp.strftime("%Y-%m-%d %H:%M UTC"),
    )


def appointment_to_dto(appointment: Appointment) -> AppointmentDTO:
    return AppointmentDTO(
        id=appointment.id,
        equipment=appointment.equipment.value,
        issue=appointment.issue,
        name=appointment.name,
        email=appointment.email,
        phone=appointment.phone,
        date=appointment.date.isoformat(),
        time=appointment.time,
        details=appointment.details,
    )
