from django.urls import path

from .views import LoginView, VerifyTokenView

app_name = 'accounts'

urlpatterns = [
    path('login', LoginView.as_view(), name='login'),
    path('verify', VerifyTokenView.as_view(), name='verify'),
]
