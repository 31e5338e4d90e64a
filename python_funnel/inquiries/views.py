"""
API views for the tracking funnel service.

Every response carries a correlation_id that also appears in the logs for
the request. Expected outcomes (validation, duplicate, not found) map to
explicit status codes; anything else becomes a generic 500.
"""
import logging
import uuid
from rest_framework.exceptions import ParseError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from django.conf import settings
from django.views.decorators.csrf import csrf_exempt
from django.utils.decorators import method_decorator

from inquiries.models import Contact, Order, TrackingService
from inquiries.serializers import (
    CallbackRequestCreateSerializer,
    CallbackRequestQuerySerializer,
    CallbackRequestSerializer,
    CallbackRequestUpdateSerializer,
    ContactCreateSerializer,
    ContactQuerySerializer,
    ContactSerializer,
    OrderCreateSerializer,
    OrderSerializer,
)
from inquiries.services.dedup import DuplicateSubmissionError
from inquiries.services.lifecycle import (
    CallbackRequestNotFound,
    create_callback_request,
    delete_callback_request,
    get_callback_request,
    public_projection,
    update_callback_request,
)
from inquiries.services.orders import create_order
from inquiries.services.query import list_callback_requests, paginate
from inquiries.services.stats import callback_statistics
from inquiries.tasks import (
    enqueue_notification,
    send_callback_notifications,
    send_contact_notifications,
    send_order_notifications,
)

logger = logging.getLogger(__name__)


def _new_correlation_id() -> str:
    return str(uuid.uuid4())


def _success(message: str, correlation_id: str, data=None, status_code=status.HTTP_200_OK) -> Response:
    body = {'success': True, 'message': message, 'correlation_id': correlation_id}
    if data is not None:
        body['data'] = data
    return Response(body, status=status_code)


def _failure(message: str, correlation_id: str, status_code: int, errors=None) -> Response:
    body = {'success': False, 'message': message, 'correlation_id': correlation_id}
    if errors is not None:
        body['errors'] = errors
    return Response(body, status=status_code)


def _validation_failure(errors, correlation_id: str) -> Response:
    logger.info(f"Validation failed: {dict(errors)}, correlation_id={correlation_id}")
    return _failure('Validation failed', correlation_id, status.HTTP_400_BAD_REQUEST, errors=errors)


def _malformed_json(error: Exception, correlation_id: str) -> Response:
    logger.warning(f"Malformed JSON payload: {error}, correlation_id={correlation_id}")
    return _failure('Malformed JSON', correlation_id, status.HTTP_400_BAD_REQUEST)


def _internal_error(action: str, error: Exception, correlation_id: str) -> Response:
    logger.error(
        f"Error {action}: {error}, correlation_id={correlation_id}",
        exc_info=True
    )
    response = _failure('Internal server error', correlation_id, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if settings.DEBUG:
        response.data['error'] = str(error)
    return response


@method_decorator(csrf_exempt, name='dispatch')
class CallbackRequestListCreateView(APIView):
    """
    POST /api/callbacks/ - public callback submission
    GET  /api/callbacks/ - filtered, paginated list for the admin dashboard
    """

    def post(self, request):
        """
        Returns:
            201 Created: Request stored, sales team notification queued
            400 Bad Request: Invalid input
            409 Conflict: Same phone number submitted within the dedup window
            500 Internal Server Error: Unexpected error
        """
        correlation_id = _new_correlation_id()

        try:
            serializer = CallbackRequestCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            try:
                callback_request = create_callback_request(serializer.validated_data)
            except DuplicateSubmissionError:
                return _failure(
                    'A callback request from this number was already submitted recently. '
                    'Please wait before submitting another request.',
                    correlation_id,
                    status.HTTP_409_CONFLICT,
                )

            logger.info(
                f"Callback request {callback_request.id} stored, "
                f"correlation_id={correlation_id}"
            )

            enqueue_notification(send_callback_notifications, callback_request.id)

            return _success(
                'Callback request submitted successfully. We will contact you soon!',
                correlation_id,
                data=public_projection(callback_request),
                status_code=status.HTTP_201_CREATED,
            )

        except ParseError as e:
            return _malformed_json(e, correlation_id)
        except Exception as e:
            return _internal_error('creating callback request', e, correlation_id)

    def get(self, request):
        correlation_id = _new_correlation_id()

        try:
            serializer = CallbackRequestQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            criteria = dict(serializer.validated_data)
            page = criteria.pop('page')
            limit = criteria.pop('limit')
            result = list_callback_requests(criteria, page=page, limit=limit)

            return _success(
                'Callback requests retrieved successfully',
                correlation_id,
                data={
                    'requests': CallbackRequestSerializer(result['requests'], many=True).data,
                    'pagination': result['pagination'],
                    'statusCounts': result['status_counts'],
                },
            )

        except Exception as e:
            return _internal_error('fetching callback requests', e, correlation_id)


class CallbackRequestStatsView(APIView):
    """GET /api/callbacks/stats/ - dashboard statistics"""

    def get(self, request):
        correlation_id = _new_correlation_id()
        try:
            return _success(
                'Callback statistics retrieved successfully',
                correlation_id,
                data=callback_statistics(),
            )
        except Exception as e:
            return _internal_error('fetching callback stats', e, correlation_id)


@method_decorator(csrf_exempt, name='dispatch')
class CallbackRequestDetailView(APIView):
    """GET, PUT/PATCH and DELETE /api/callbacks/<id>/"""

    not_found_message = 'Callback request not found'

    def get(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            callback_request = get_callback_request(pk)
            return _success(
                'Callback request retrieved successfully',
                correlation_id,
                data=CallbackRequestSerializer(callback_request).data,
            )
        except CallbackRequestNotFound:
            return _failure(self.not_found_message, correlation_id, status.HTTP_404_NOT_FOUND)
        except Exception as e:
            return _internal_error('fetching callback request', e, correlation_id)

    def put(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            serializer = CallbackRequestUpdateSerializer(data=request.data, partial=True)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            callback_request = update_callback_request(pk, serializer.validated_data)
            logger.info(
                f"Callback request {pk} updated, correlation_id={correlation_id}"
            )
            return _success(
                'Callback request updated successfully',
                correlation_id,
                data=CallbackRequestSerializer(callback_request).data,
            )
        except CallbackRequestNotFound:
            return _failure(self.not_found_message, correlation_id, status.HTTP_404_NOT_FOUND)
        except ParseError as e:
            return _malformed_json(e, correlation_id)
        except Exception as e:
            return _internal_error('updating callback request', e, correlation_id)

    patch = put

    def delete(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            delete_callback_request(pk)
            logger.info(f"Callback request {pk} deleted, correlation_id={correlation_id}")
            return _success('Callback request deleted successfully', correlation_id)
        except CallbackRequestNotFound:
            return _failure(self.not_found_message, correlation_id, status.HTTP_404_NOT_FOUND)
        except Exception as e:
            return _internal_error('deleting callback request', e, correlation_id)


@method_decorator(csrf_exempt, name='dispatch')
class ContactListCreateView(APIView):
    """
    POST /api/contacts/ - public contact form
    GET  /api/contacts/ - paginated list, newest first
    """

    def post(self, request):
        correlation_id = _new_correlation_id()

        try:
            serializer = ContactCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            contact = Contact.objects.create(**serializer.validated_data)
            logger.info(f"Contact {contact.id} stored, correlation_id={correlation_id}")

            enqueue_notification(send_contact_notifications, contact.id)

            return _success(
                'Contact inquiry submitted successfully',
                correlation_id,
                data={
                    'id': contact.id,
                    'fullName': contact.full_name,
                    'selectedPlan': contact.selected_plan,
                    'createdAt': contact.created_at,
                },
                status_code=status.HTTP_201_CREATED,
            )

        except ParseError as e:
            return _malformed_json(e, correlation_id)
        except Exception as e:
            return _internal_error('creating contact', e, correlation_id)

    def get(self, request):
        correlation_id = _new_correlation_id()

        try:
            serializer = ContactQuerySerializer(data=request.query_params)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            page = serializer.validated_data['page']
            limit = serializer.validated_data['limit']
            offset = (page - 1) * limit

            contacts = Contact.objects.order_by('-created_at', '-id')[offset:offset + limit]
            total = Contact.objects.count()

            pagination = paginate(total, page, limit)
            pagination['totalContacts'] = pagination.pop('totalRequests')

            return _success(
                'Contacts retrieved successfully',
                correlation_id,
                data={
                    'contacts': ContactSerializer(contacts, many=True).data,
                    'pagination': pagination,
                },
            )

        except Exception as e:
            return _internal_error('fetching contacts', e, correlation_id)


@method_decorator(csrf_exempt, name='dispatch')
class ContactDetailView(APIView):
    """GET and DELETE /api/contacts/<id>/"""

    def get(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            contact = Contact.objects.get(pk=pk)
            return _success(
                'Contact retrieved successfully',
                correlation_id,
                data=ContactSerializer(contact).data,
            )
        except Contact.DoesNotExist:
            return _failure('Contact not found', correlation_id, status.HTTP_404_NOT_FOUND)
        except Exception as e:
            return _internal_error('fetching contact', e, correlation_id)

    def delete(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            deleted, _ = Contact.objects.filter(pk=pk).delete()
            if not deleted:
                return _failure('Contact not found', correlation_id, status.HTTP_404_NOT_FOUND)
            logger.info(f"Contact {pk} deleted, correlation_id={correlation_id}")
            return _success('Contact deleted successfully', correlation_id)
        except Exception as e:
            return _internal_error('deleting contact', e, correlation_id)


class ContactsByPlanView(APIView):
    """GET /api/contacts/plan/<plan>/"""

    def get(self, request, plan):
        correlation_id = _new_correlation_id()
        try:
            if plan not in TrackingService.values:
                return _failure('Invalid plan type', correlation_id, status.HTTP_400_BAD_REQUEST)

            contacts = Contact.objects.filter(selected_plan=plan).order_by('-created_at', '-id')
            data = ContactSerializer(contacts, many=True).data
            return _success(
                f'Contacts for {plan} retrieved successfully',
                correlation_id,
                data={'plan': plan, 'count': len(data), 'contacts': data},
            )
        except Exception as e:
            return _internal_error('fetching contacts by plan', e, correlation_id)


@method_decorator(csrf_exempt, name='dispatch')
class OrderListCreateView(APIView):
    """
    POST /api/orders/ - place a package order
    GET  /api/orders/ - all orders, newest first
    """

    def post(self, request):
        correlation_id = _new_correlation_id()

        try:
            serializer = OrderCreateSerializer(data=request.data)
            if not serializer.is_valid():
                return _validation_failure(serializer.errors, correlation_id)

            order = create_order(serializer.validated_data)
            logger.info(
                f"Order {order.id} stored with contract {order.contract_number}, "
                f"correlation_id={correlation_id}"
            )

            enqueue_notification(send_order_notifications, order.id)

            return _success(
                'Order created successfully',
                correlation_id,
                data={
                    'orderId': order.id,
                    'contractNumber': order.contract_number,
                    'packageName': order.package_details['name'],
                    'price': order.package_details['price'],
                },
                status_code=status.HTTP_201_CREATED,
            )

        except ParseError as e:
            return _malformed_json(e, correlation_id)
        except Exception as e:
            return _internal_error('creating order', e, correlation_id)

    def get(self, request):
        correlation_id = _new_correlation_id()
        try:
            orders = Order.objects.order_by('-order_date', '-id')
            return _success(
                'Orders retrieved successfully',
                correlation_id,
                data=OrderSerializer(orders, many=True).data,
            )
        except Exception as e:
            return _internal_error('fetching orders', e, correlation_id)


class OrderDetailView(APIView):
    """GET /api/orders/<id>/"""

    def get(self, request, pk):
        correlation_id = _new_correlation_id()
        try:
            order = Order.objects.get(pk=pk)
            return _success(
                'Order retrieved successfully',
                correlation_id,
                data=OrderSerializer(order).data,
            )
        except Order.DoesNotExist:
            return _failure('Order not found', correlation_id, status.HTTP_404_NOT_FOUND)
        except Exception as e:
            return _internal_error('fetching order', e, correlation_id)
