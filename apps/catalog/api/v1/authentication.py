from rest_framework import authentication


class SessionAuthentication(authentication.SessionAuthentication):
    """
    Session auth that answers 401 instead of 403 for anonymous requests.
    DRF only sends 401 when the authenticator provides a challenge header.
    """

    def authenticate_header(self, request):
        return "Session"
