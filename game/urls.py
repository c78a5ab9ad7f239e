from django.urls import path

from . import views

urlpatterns = [
    path("", views.home, name="home"),
    path("progress/", views.progress_view, name="progress"),
    path("tutorial/<str:mode>/", views.tutorial, name="tutorial"),
    path("tutorial/<str:mode>/next/", views.tutorial_next, name="tutorial_next"),
    path("tutorial/<str:mode>/prev/", views.tutorial_prev, name="tutorial_prev"),
    path("practice/", views.practice, name="practice"),
    path("practice/action/<str:move>/", views.practice_action, name="practice_action"),
    path("practice/next/", views.practice_next, name="practice_next"),
    path("play/", views.play, name="play"),
    path("play/new-hand/", views.new_hand, name="new_hand"),
    path("play/action/<str:move>/", views.player_action, name="player_action"),
    path("play/recommendation/", views.recommendation, name="recommendation"),
    path("play/ai-tip/", views.ai_tip, name="ai_tip"),
    path("api/analyze-move/", views.analyze_move, name="analyze_move"),
    path("api/coach-insight/", views.coach_insight, name="coach_insight"),
]
