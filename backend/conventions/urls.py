"""
Conventions app URLs
"""
from django.urls import path

from . import views

app_name = "conventions"

urlpatterns = [
    path("rules/", views.RuleListView.as_view(), name="rule-list"),
    path("rules/<str:rule_id>/", views.RuleDetailView.as_view(), name="rule-detail"),
    path("layout/", views.LayoutView.as_view(), name="layout"),
    path("naming/", views.NamingView.as_view(), name="naming"),
    path("propositions/", views.PropositionView.as_view(), name="proposition"),
]
