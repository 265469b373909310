from revlist.reviews.models.reply_draft import ReplyDraft
from revlist.reviews.models.revision import Revision


__all__ = [
    'ReplyDraft',
    'Revision',
]
