"""User-facing messages. Safe to show to the person who submitted the documents."""

IMAGE_NOT_FOUND = "image not found"
IMAGES_NOT_FOUND = "one or more image files not found"
UNSUPPORTED_IMAGE = (
    "Unsupported image. Send a JPG, PNG, GIF or WEBP photo within the upload size limit."
)
PROCESSING_ERROR = "error processing image"
UNREADABLE_IMAGE = "the file could not be read as an image"

NOT_A_DOCUMENT = (
    "The image does not look like a valid document. "
    "Make sure it is a clear photo of an official document."
)
TYPE_MISMATCH = "Document type does not match the expected side"
LOW_CONFIDENCE = (
    "Could not clearly identify the document. "
    "Make sure the image is sharp, well lit and free of glare."
)

NO_FACE_IN_SELFIE = "No face detected in the selfie"
NO_FACE_IN_DOCUMENT = "No face detected in the document photo"
FACES_DO_NOT_MATCH = "The selfie does not match the document photo"

FRONT_PREFIX = "Problem with the front of the document"
BACK_PREFIX = "Problem with the back of the document"
FACE_PREFIX = "Problem with the face comparison"
QUEUE_PREFIX = "Could not add documents to the moderation queue"

TRY_AGAIN_LATER = "We could not process your documents right now. Please try again later."
READY_FOR_REVIEW = "Documents processed successfully and ready for review"
TIMED_OUT = "processing timed out"
CANCELLED = "processing cancelled"
