"""
Core views for the admin backend.
"""

from rest_framework import viewsets


class ServiceViewSet(viewsets.ViewSet):
    """
    Base ViewSet for endpoints backed by a service class.

    Subclasses set ``service_class``; handlers call ``get_service()`` and
    ``params()`` and return the service result.
    """
    service_class = None

    def get_service(self):
        return self.service_class(
            user=self.request.user,
            context={'request': self.request}
        )

    def params(self):
        """Query parameters for reads, the request body for writes."""
        if self.request.method in ('GET', 'HEAD', 'OPTIONS', 'DELETE'):
            return self.request.query_params
        return self.request.data

    def body(self, **extra):
        """Request body as a plain dict, with ``extra`` keys merged in."""
        data = self.request.data
        if hasattr(data, 'lists'):
            data = {
                key.rstrip('[]'): values if len(values) > 1 or key.endswith('[]') else values[0]
                for key, values in data.lists()
            }
        else:
            data = dict(data)
        data.update(extra)
        return data
