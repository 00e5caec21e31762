"""
Restaurant API — Application Procedures
========================================

What:  The application router: one procedure per service operation.
How:   Each handler is a one-line delegation to a service singleton. Input
       types come from the schema modules, so validation happens in the
       registry before any handler runs.

Procedure inventory:
    healthcheck
    Menu:          createMenuItem, getMenuItems, getMenuItemsByCategory,
                   getMenuItemById, updateMenuItem, deleteMenuItem
    Orders:        createOrder, getOrders, getOrdersByStatus, getOrderById,
                   updateOrderStatus
    Reservations:  createReservation, getReservations,
                   getReservationsByStatus, getReservationsByDate,
                   getReservationById, updateReservationStatus
    Testimonials:  createTestimonial, getTestimonials,
                   getTestimonialsByRating, getTestimonialById,
                   updateTestimonial, deleteTestimonial
"""

from datetime import datetime, timezone

from restaurant_api.rpc.registry import ProcedureRouter
from restaurant_api.schemas.common import EntityId, NonEmptyStr
from restaurant_api.schemas.menu_item import (
    CreateMenuItemInput,
    MenuCategory,
    UpdateMenuItemInput,
)
from restaurant_api.schemas.order import (
    CreateOrderInput,
    OrderStatus,
    UpdateOrderStatusInput,
)
from restaurant_api.schemas.reservation import (
    CreateReservationInput,
    ReservationStatus,
    UpdateReservationStatusInput,
)
from restaurant_api.schemas.testimonial import (
    CreateTestimonialInput,
    Rating,
    UpdateTestimonialInput,
)
from restaurant_api.services.menu_service import menu_service
from restaurant_api.services.order_service import order_service
from restaurant_api.services.reservation_service import reservation_service
from restaurant_api.services.testimonial_service import testimonial_service

app_router = ProcedureRouter()


@app_router.query("healthcheck")
async def healthcheck(db):
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


# ── Menu ──────────────────────────────────────────────────────────────────

@app_router.mutation("createMenuItem", input=CreateMenuItemInput)
async def create_menu_item(db, data):
    return await menu_service.create_menu_item(db, data)


@app_router.query("getMenuItems")
async def get_menu_items(db):
    return await menu_service.list_menu_items(db)


@app_router.query("getMenuItemsByCategory", input=MenuCategory)
async def get_menu_items_by_category(db, category):
    return await menu_service.list_menu_items_by_category(db, category)


@app_router.query("getMenuItemById", input=EntityId)
async def get_menu_item_by_id(db, item_id):
    return await menu_service.get_menu_item(db, item_id)


@app_router.mutation("updateMenuItem", input=UpdateMenuItemInput)
async def update_menu_item(db, data):
    return await menu_service.update_menu_item(db, data)


@app_router.mutation("deleteMenuItem", input=EntityId)
async def delete_menu_item(db, item_id):
    return await menu_service.delete_menu_item(db, item_id)


# ── Orders ────────────────────────────────────────────────────────────────

@app_router.mutation("createOrder", input=CreateOrderInput)
async def create_order(db, data):
    return await order_service.create_order(db, data)


@app_router.query("getOrders")
async def get_orders(db):
    return await order_service.list_orders(db)


@app_router.query("getOrdersByStatus", input=OrderStatus)
async def get_orders_by_status(db, status):
    return await order_service.list_orders_by_status(db, status)


@app_router.query("getOrderById", input=EntityId)
async def get_order_by_id(db, order_id):
    return await order_service.get_order(db, order_id)


@app_router.mutation("updateOrderStatus", input=UpdateOrderStatusInput)
async def update_order_status(db, data):
    return await order_service.update_order_status(db, data)


# ── Reservations ──────────────────────────────────────────────────────────

@app_router.mutation("createReservation", input=CreateReservationInput)
async def create_reservation(db, data):
    return await reservation_service.create_reservation(db, data)


@app_router.query("getReservations")
async def get_reservations(db):
    return await reservation_service.list_reservations(db)


@app_router.query("getReservationsByStatus", input=ReservationStatus)
async def get_reservations_by_status(db, status):
    return await reservation_service.list_reservations_by_status(db, status)


@app_router.query("getReservationsByDate", input=NonEmptyStr)
async def get_reservations_by_date(db, date):
    return await reservation_service.list_reservations_by_date(db, date)


@app_router.query("getReservationById", input=EntityId)
async def get_reservation_by_id(db, reservation_id):
    return await reservation_service.get_reservation(db, reservation_id)


@app_router.mutation("updateReservationStatus", input=UpdateReservationStatusInput)
async def update_reservation_status(db, data):
    return await reservation_service.update_reservation_status(db, data)


# ── Testimonials ──────────────────────────────────────────────────────────

@app_router.mutation("createTestimonial", input=CreateTestimonialInput)
async def create_testimonial(db, data):
    return await testimonial_service.create_testimonial(db, data)


@app_router.query("getTestimonials")
async def get_testimonials(db):
    return await testimonial_service.list_testimonials(db)


@app_router.query("getTestimonialsByRating", input=Rating)
async def get_testimonials_by_rating(db, min_rating):
    return await testimonial_service.list_testimonials_by_min_rating(db, min_rating)


@app_router.query("getTestimonialById", input=EntityId)
async def get_testimonial_by_id(db, testimonial_id):
    return await testimonial_service.get_testimonial(db, testimonial_id)


@app_router.mutation("updateTestimonial", input=UpdateTestimonialInput)
async def update_testimonial(db, data):
    return await testimonial_service.update_testimonial(db, data)


@app_router.mutation("deleteTestimonial", input=EntityId)
async def delete_testimonial(db, testimonial_id):
    return await testimonial_service.delete_testimonial(db, testimonial_id)
