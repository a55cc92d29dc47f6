"""Use case to total the bookings of one invoice recipient."""

from src.application.ports.bookings_repository import BookingsRepositoryPort
from src.domain.exceptions import InconsistentCurrenciesError
from src.domain.models import BookingTotals
from src.domain.services.booking_totals import compute_booking_totals
from src.infrastructure.logging.logger import get_app_logger


class GetBookingTotalsUseCase:
    """Compute gross, paid and open totals for an invoice recipient."""

    def __init__(
        self,
        bookings_repository: BookingsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            bookings_repository: Port providing the bookings to total.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._bookings_repository = bookings_repository
        self._logger = logger or get_app_logger()

    def execute(self, recipient_id: int) -> BookingTotals:
        """Return the totals of the recipient's bookings.

        Args:
            recipient_id: Key of the invoice recipient.

        Returns:
            BookingTotals: Totals, empty when no booking is relevant.

        Raises:
            InconsistentCurrenciesError: If relevant bookings mix currencies.
        """
        bookings = self._bookings_repository.fetch_bookings(recipient_id)
        self._logger.info(
            f"Fetched {len(bookings)} bookings for recipient {recipient_id}"
        )
        try:
            totals = compute_booking_totals(
                bookings,
                recipient_id,
                logger=self._logger,
            )
        except InconsistentCurrenciesError as exc:
            self._logger.error(
                f"Cannot total bookings of recipient {recipient_id}: {exc}"
            )
            raise

        if totals.is_empty:
            self._logger.info(
                f"No relevant bookings for recipient {recipient_id}"
            )
        else:
            self._logger.info(
                f"Booking totals computed: gross={totals.total_amount}, "
                f"paid={totals.total_paid_amount}, "
                f"open={totals.total_open_amount}"
            )
        return totals


__all__ = ["GetBookingTotalsUseCase", "BookingTotals"]
