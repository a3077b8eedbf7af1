"""Builders for fake search.list responses and a fake googleapiclient service."""

import json

import httplib2
from googleapiclient.errors import HttpError


def make_item(n, **overrides):
    """A search.list result item for video number n."""
    item = {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#video", "videoId": f"vid{n:04d}"},
        "snippet": {
            "title": f"Video {n}",
            "description": f"Description {n}",
            "publishedAt": f"2023-01-01T00:00:{n % 60:02d}Z",
        },
    }
    item.update(overrides)
    return item


def make_pages(total, page_size=50):
    """Split `total` items into search.list responses linked by nextPageToken."""
    items = [make_item(n) for n in range(total)]
    chunks = [items[i:i + page_size] for i in range(0, total, page_size)] or [[]]
    pages = []
    for index, chunk in enumerate(chunks):
        page = {"kind": "youtube#searchListResponse", "items": chunk}
        if index < len(chunks) - 1:
            page["nextPageToken"] = f"token{index + 1}"
        pages.append(page)
    return pages


def make_http_error(status, payload=None):
    body = json.dumps(payload or {"error": {"code": status, "message": "failure"}})
    return HttpError(httplib2.Response({"status": status}), body.encode("utf-8"))


def set_channel_response(service, response=None, error=None):
    execute = service.channels.return_value.list.return_value.execute
    if error is not None:
        execute.side_effect = error
    else:
        execute.return_value = response


def set_search_responses(service, *responses):
    """Each response is either a dict body or an exception to raise."""
    service.search.return_value.list.return_value.execute.side_effect = list(responses)


def search_calls(service):
    return service.search.return_value.list.call_args_list
