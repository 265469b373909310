"""Generic list widgets for displaying objects as cards.

An :py:class:`ObjectItemListView` holds a series of
:py:class:`ObjectItemView` instances. Each item shows an object's name and
header along with attributes, bylines, icons and state icons. Callers fill
these in and then render the list.
"""

from __future__ import annotations

from django.template.loader import render_to_string
from django.utils.translation import gettext_lazy as _


#: The icon name used to reserve space for an empty icon slot.
NO_ICON = 'none'


class ObjectItemView:
    """An item in an object list.

    Attributes:
        object_name (str):
            The short name of the object, such as ``D123``.

        header (str or django.utils.safestring.SafeString):
            The main header for the item. This is usually a link to the
            object.

        attributes (list):
            Short pieces of information shown below the header.

        bylines (list):
            Information about who is responsible for the object.

        icons (list of tuple):
            ``(icon, label)`` pairs shown in the item's detail area.

        state_icons (list of tuple):
            ``(icon, label)`` pairs shown in the item's state columns.

        state_icon_columns (int):
            The number of columns used to lay out the state icons.
    """

    template_name = 'ui/object_item.html'

    def __init__(self, object_name=None, header=None):
        """Initialize the item.

        Args:
            object_name (str, optional):
                The short name of the object.

            header (str, optional):
                The header for the item.
        """
        self.object_name = object_name
        self.header = header
        self.attributes = []
        self.bylines = []
        self.icons = []
        self.state_icons = []
        self.state_icon_columns = 1

    def add_attribute(self, attribute):
        """Add an attribute to the item.

        Args:
            attribute (str or django.utils.safestring.SafeString):
                The attribute to show.
        """
        self.attributes.append(attribute)

    def add_byline(self, byline):
        """Add a byline to the item.

        Args:
            byline (str or django.utils.safestring.SafeString):
                The byline to show.
        """
        self.bylines.append(byline)

    def add_icon(self, icon, label=None):
        """Add an icon to the item's details.

        Args:
            icon (str):
                The name of the icon, or ``none`` for no icon.

            label (str, optional):
                The text shown beside the icon.
        """
        self.icons.append((icon, label))

    def add_state_icon(self, icon, label=None):
        """Add an icon to the item's state columns.

        Args:
            icon (str):
                The name of the icon, or ``none`` to leave the slot empty.

            label (str, optional):
                The tooltip for the icon.
        """
        self.state_icons.append((icon, label))

    def get_state_icon_rows(self):
        """Return the state icons split into rows.

        Returns:
            list of list of tuple:
            The state icons, with :py:attr:`state_icon_columns` icons per row.
        """
        columns = max(self.state_icon_columns, 1)

        return [
            self.state_icons[i:i + columns]
            for i in range(0, len(self.state_icons), columns)
        ]

    def render(self, request=None):
        """Render the item.

        Args:
            request (django.http.HttpRequest, optional):
                The HTTP request from the client.

        Returns:
            django.utils.safestring.SafeString:
            The rendered HTML for the item.
        """
        return render_to_string(
            template_name=self.template_name,
            context={
                'item': self,
                'no_icon': NO_ICON,
                'state_icon_rows': self.get_state_icon_rows(),
            },
            request=request)


class ObjectItemListView:
    """A list of object items.

    Attributes:
        items (list of ObjectItemView):
            The items in the list.

        header (str):
            The header shown above the list.

        no_data_string (str):
            The text shown when there are no items.

        cards (bool):
            Whether the items are rendered as cards.
    """

    template_name = 'ui/object_item_list.html'

    #: The text shown for empty lists when no other text is provided.
    default_no_data_string = _('No data.')

    def __init__(self, header=None, no_data_string=None, cards=False):
        """Initialize the list.

        Args:
            header (str, optional):
                The header shown above the list.

            no_data_string (str, optional):
                The text shown when there are no items.

            cards (bool, optional):
                Whether the items are rendered as cards.
        """
        self.items = []
        self.header = header
        self.no_data_string = no_data_string
        self.cards = cards

    def add_item(self, item):
        """Add an item to the list.

        Args:
            item (ObjectItemView):
                The item to add.
        """
        self.items.append(item)

    def get_no_data_string(self):
        """Return the text to show when the list is empty.

        Returns:
            str:
            The configured text, or a default.
        """
        return self.no_data_string or self.default_no_data_string

    def render(self, request=None):
        """Render the list.

        Args:
            request (django.http.HttpRequest, optional):
                The HTTP request from the client.

        Returns:
            django.utils.safestring.SafeString:
            The rendered HTML for the list.
        """
        return render_to_string(
            template_name=self.template_name,
            context={
                'header': self.header,
                'no_data_string': self.get_no_data_string(),
                'cards': self.cards,
                'rendered_items': [
                    item.render(request=request)
                    for item in self.items
                ],
            },
            request=request)

    def __len__(self):
        return len(self.items)
