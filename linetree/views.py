import json
import logging

from django.conf import settings
from django.http import HttpResponseBadRequest, JsonResponse
from django.urls import reverse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from linetree import demo, explorer, huffman

logger = logging.getLogger(__name__)


def get_share_param():
    return getattr(settings, "LINETREE_SHARE_PARAM", "l")


def build_share_url(token):
    base_url = getattr(settings, "LINETREE_BASE_URL", "")
    return f"{base_url}{reverse('explore')}?{get_share_param()}={token}"


def serialize_result(result, cursor):
    board = explorer.board_view(result, cursor)
    return {
        "status": "success" if result.ok else "invalid",
        "error": result.error,
        "text": result.text,
        "path": explorer.format_cursor(board.cursor),
        "board": board.to_dict(),
    }


def render_result(request, result):
    try:
        cursor = explorer.parse_cursor(request.GET.get("path"))
        data = serialize_result(result, cursor)
    except (ValueError, IndexError) as e:
        return HttpResponseBadRequest(str(e))
    return JsonResponse(data)


@require_GET
def home(request):
    return render_result(request, explorer.load_lines(demo.PONZIANI))


@require_GET
def explore(request):
    # absent or broken tokens come back as an (invalid) empty document
    result = explorer.load_shared(request.GET.get(get_share_param()))
    return render_result(request, result)


def get_posted_text(request):
    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body or b"{}")
        except json.JSONDecodeError:
            return None
        text = payload.get("text") if isinstance(payload, dict) else None
    else:
        text = request.POST.get("text")
    return text if isinstance(text, str) else None


@csrf_exempt
@require_POST
def share(request):
    text = get_posted_text(request)
    if text is None:
        return JsonResponse({"status": "error", "error": "No text provided"}, status=400)

    result = explorer.load_lines(text)
    if not result.ok:
        return JsonResponse(
            {"status": "invalid", "error": result.error, "text": text}, status=400
        )

    token = explorer.share_token(text)
    logger.info("Shared lines document (%d chars ➤ %d)", len(text), len(token))
    return JsonResponse(
        {
            "status": "success",
            "token": token,
            "url": build_share_url(token),
            # compress drops these, so the shared copy won't have them
            "dropped": huffman.unsupported_chars(text),
        }
    )
