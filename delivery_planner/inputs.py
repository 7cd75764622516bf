# inputs.py
# Rules for turning what the player typed (or what a CSV holds) into
# location names and DeliveryJob objects.

from .logging_config import get_logger
from .models import DeliveryJob

logger = get_logger(__name__)

DONE_WORD = "done"


class InputError(ValueError):
    """Raised when entered data cannot become a location list or a job."""


class InvalidAmountError(InputError):
    """Raised for a drop amount that is not a non-negative whole number."""


def normalize_location_names(names, count=4):
    """
    Return exactly `count` location names.

    Blank names become "Location N" (1-based position), missing names are
    padded the same way. Too many names, or duplicates, raise InputError.
    """
    names = list(names)
    if len(names) > count:
        raise InputError(f"Expected at most {count} locations, got {len(names)}")

    # Pad so every position gets a name
    names += [""] * (count - len(names))

    result = []
    for i, name in enumerate(names):
        name = (name or "").strip()
        if name == "":
            name = f"Location {i + 1}"
        if name in result:
            raise InputError(f"Duplicate location name: {name}")
        result.append(name)

    return result


def parse_drop_amount(text):
    # Blank means "nothing for this location"
    if text is None:
        return 0
    text = str(text).strip()
    if text == "":
        return 0

    # Plain ASCII digits only, no "1_000" or other scripts' digits
    if not (text.isascii() and text.lstrip("+-").isdigit()):
        raise InvalidAmountError(
            f"Invalid amount {text!r}. Please enter a non-negative whole number."
        )

    try:
        amount = int(text)
    except ValueError:
        raise InvalidAmountError(
            f"Invalid amount {text!r}. Please enter a non-negative whole number."
        ) from None

    if amount < 0:
        raise InvalidAmountError(
            f"Invalid amount {text!r}. Please enter a non-negative whole number."
        )
    return amount


def is_done(name):
    return (name or "").strip().lower() == DONE_WORD


def build_job(resource_name, amounts, location_names):
    """
    resource_name:  what the player called the resource
    amounts:        one raw amount per location (same order), or a dict
                    keyed by location name; missing entries count as 0, extra
                    amounts or unknown locations raise InputError
    location_names: the session's locations

    Returns a DeliveryJob, or None when nothing is delivered anywhere.
    """
    resource_name = (resource_name or "").strip()
    if resource_name == "":
        raise InputError("Resource name cannot be empty.")

    if isinstance(amounts, dict):
        unknown = [key for key in amounts if key not in location_names]
        if unknown:
            raise InputError(
                f"Unknown location(s) for {resource_name}: {', '.join(map(str, unknown))}"
            )
        raw = [amounts.get(location) for location in location_names]
    else:
        raw = list(amounts)
        extra = [text for text in raw[len(location_names):] if str(text or "").strip() != ""]
        if extra:
            raise InputError(
                f"{resource_name} has {len(raw)} amounts but only {len(location_names)} locations"
            )
        raw = raw[:len(location_names)]
        raw += [None] * (len(location_names) - len(raw))

    drops = {}
    for location, text in zip(location_names, raw):
        drops[location] = parse_drop_amount(text)

    job = DeliveryJob(resource_name, drops)
    if job.total_needed == 0:
        logger.warning(f"Job for {resource_name} skipped: Total units to deliver was 0.")
        return None

    return job
