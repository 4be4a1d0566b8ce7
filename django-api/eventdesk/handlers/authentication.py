from rest_framework.authentication import SessionAuthentication


class BrowserSessionAuthentication(SessionAuthentication):
    """CSRF protection for cookie-bound clients.

    Identity is owned by the remote API, so no Django user is resolved;
    unsafe requests must still carry a valid CSRF token.
    """

    def authenticate(self, request):
        self.enforce_csrf(request)
        return None
