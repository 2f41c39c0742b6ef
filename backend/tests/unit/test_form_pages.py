"""Unit tests for the create/edit form pages."""

import json

import pytest

from cigi_web.application.forms import (
    BusinessUnitServiceForm,
    CommunityClubActivityForm,
    ContactForm,
    GlobalVariableForm,
    MediaForm,
    NewsForm,
    get_form,
    slugify,
    split_tags,
)
from cigi_web.domain.entities import (
    BusinessUnitService,
    CommunityClubActivity,
    FileUpload,
    GlobalVariable,
    Media,
    News,
    Page,
    ProcessStep,
    ToastType,
    VariableType,
)
from cigi_web.domain.exceptions import EntityNotFoundError, NavigationError, RouteNotFoundError


# ── Submission routing ──


@pytest.mark.asyncio
async def test_create_posts_wire_fields_to_store_route(navigator, routes):
    form = BusinessUnitServiceForm(navigator, routes)
    form.set_data({"title": "Konsultasi IT", "business_unit_id": "3"})

    await form.submit()

    visit = navigator.last
    assert (visit.method, visit.url) == ("POST", "/admin/business-unit-services")
    assert visit.data == {
        "business_unit_id": "3",
        "title": "Konsultasi IT",
        "status": "active",
        "featured": "0",
        "features": "[]",
        "technologies": "[]",
        "process_steps": "[]",
    }
    assert visit.files is None
    assert form.recently_successful
    assert not form.processing


@pytest.mark.asyncio
async def test_edit_spoofs_put_over_post(navigator, routes):
    service = BusinessUnitService(
        business_unit_id=2,
        title="Pelatihan",
        features=["Modul"],
        process_steps=[ProcessStep(title="Analisis", order=1, id="s1")],
        featured=True,
        id=7,
    )
    form = BusinessUnitServiceForm.for_service(service, navigator, routes)
    form.set_data("image", FileUpload("cover.jpg", b"jpg", "image/jpeg"))

    await form.submit()

    visit = navigator.last
    assert (visit.method, visit.url) == ("POST", "/admin/business-unit-services/7")
    assert visit.data["_method"] == "PUT"
    assert visit.data["featured"] == "1"
    assert json.loads(visit.data["features"]) == ["Modul"]
    assert json.loads(visit.data["process_steps"])[0]["title"] == "Analisis"
    assert visit.files["image"].filename == "cover.jpg"


@pytest.mark.asyncio
async def test_plain_form_sends_real_verb(navigator, routes):
    variable = GlobalVariable(key="company_name", value="CIGI", id=4)
    form = GlobalVariableForm.for_variable(variable, navigator, routes)

    await form.submit()

    visit = navigator.last
    assert (visit.method, visit.url) == ("PUT", "/admin/global-variables/4")
    assert visit.data["type"] == "text"
    assert visit.data["is_public"] == "1"
    assert "_method" not in visit.data


@pytest.mark.asyncio
async def test_missing_route_raises(navigator, routes):
    form = MediaForm(navigator, routes)
    with pytest.raises(RouteNotFoundError):
        await form.submit()


# ── Errors and flash ──


@pytest.mark.asyncio
async def test_backend_errors_are_kept_on_the_form(navigator, routes):
    navigator.respond_with_errors(title="Judul wajib diisi")
    form = NewsForm(navigator, routes)

    await form.submit()

    assert form.error("title") == "Judul wajib diisi"
    assert not form.recently_successful

    form.clear_errors("title")
    assert form.errors == {}


@pytest.mark.asyncio
async def test_flash_props_become_toasts(navigator, routes, flash, toast_host):
    navigator.responses.append(Page("Admin/News/Index", props={"flash": {"success": "Berita dibuat"}}))
    form = NewsForm(navigator, routes, flash=flash)

    await form.submit()

    assert toast_host.history[-1].title == "Berita dibuat"


# ── List editors stay in sync with data ──


def test_record_list_editor_writes_through(navigator, routes):
    form = BusinessUnitServiceForm(navigator, routes)

    form.process_steps.add()
    form.process_steps.update_field(1, "title", "Desain")

    steps = form.data["process_steps"]
    assert [s.order for s in steps] == [1, 2]
    assert steps[1].title == "Desain"
    assert form.process_steps.value == steps


def test_string_list_editor_and_reset(navigator, routes):
    form = CommunityClubActivityForm(navigator, routes)
    form.benefits.update(0, "Sehat")
    form.benefits.add("Relasi")
    assert form.data["benefits"] == ["Sehat", "Relasi"]

    form.reset("benefits")
    assert form.data["benefits"] == [""]
    assert form.benefits.value == [""]


def test_activity_initial_values(navigator, routes):
    activity = CommunityClubActivity(community_club_id=5, title="Latihan", max_participants=20, id=9)
    form = CommunityClubActivityForm.for_activity(activity, navigator, routes)

    assert form.is_editing
    assert form.data["max_participants"] == "20"
    assert form.data["benefits"] == [""]


def test_set_data_needs_a_value(navigator, routes):
    with pytest.raises(TypeError):
        NewsForm(navigator, routes).set_data("title")


# ── News ──


def test_slug_follows_title_until_edited(navigator, routes):
    form = NewsForm(navigator, routes)

    form.set_title("Peluncuran Produk Baru!")
    assert form.data["slug"] == "peluncuran-produk-baru"

    form.set_slug("produk")
    form.set_title("Lain")
    assert form.data["slug"] == "produk"

    form.set_slug("")
    form.set_title("Lagi Lagi")
    assert form.data["slug"] == "lagi-lagi"


def test_excerpt_is_derived_from_content(navigator, routes):
    form = NewsForm(navigator, routes)
    form.set_content("<p>" + "a" * 200 + "</p>")
    assert form.data["excerpt"] == "a" * 150

    form.set_excerpt("Ringkasan")
    form.set_content("<p>baru</p>")
    assert form.data["excerpt"] == "Ringkasan"


@pytest.mark.asyncio
async def test_news_update_is_keyed_by_slug(navigator, routes):
    news = News(title="Halo", slug="halo dunia", tags=["a", "b"], id=1)
    form = NewsForm.for_news(news, navigator, routes)
    assert form.slug_touched
    assert form.tag_list == ["a", "b"]

    await form.submit()
    assert navigator.last.url == "/admin/news/halo%20dunia"
    assert "author_id" not in navigator.last.data


def test_slug_and_tag_helpers():
    assert slugify("  Hello,  World -- 2025! ") == "hello-world-2025"
    assert split_tags("a, ,b ,") == ["a", "b"]


# ── Global variables ──


def test_switching_to_boolean_coerces_value(navigator, routes):
    form = GlobalVariableForm(navigator, routes)
    form.set_data("value", "hello")

    form.set_type("boolean")
    assert form.data["value"] == "0"
    assert form.value_input.widget == "toggle"
    assert not form.value_required

    assert form.toggle_boolean() == "1"
    assert form.boolean_label == "True"


@pytest.mark.parametrize(
    ("variable_type", "value", "ok"),
    [
        (VariableType.NUMBER, "12.5", True),
        (VariableType.NUMBER, "abc", False),
        (VariableType.EMAIL, "info@cigi.co.id", True),
        (VariableType.EMAIL, "info@", False),
        (VariableType.URL, "ftp://x.com", False),
        (VariableType.JSON, '{"a": 1}', True),
        (VariableType.JSON, "{a}", False),
        (VariableType.TEXT, "x" * 256, False),
        (VariableType.TEXT, "", True),
    ],
)
def test_value_problem(navigator, routes, variable_type, value, ok):
    form = GlobalVariableForm(navigator, routes)
    form.set_type(variable_type)
    form.set_data("value", value)
    assert (form.value_problem is None) is ok


def test_key_must_be_snake_case(navigator, routes):
    form = GlobalVariableForm(navigator, routes)
    form.set_data("key", "Company Name")
    assert form.key_problem is not None

    form.set_data("key", "company_name")
    assert form.key_problem is None


def test_visibility_toggle(navigator, routes):
    form = GlobalVariableForm(navigator, routes)
    assert form.toggle_public() is False
    assert form.visibility_label == "Privat"


# ── Media ──


@pytest.mark.asyncio
async def test_media_edit_returns_to_library(navigator, routes):
    media = Media.from_mapping({"id": 3, "filename": "a.jpg", "tags": ["hero"], "url": "/a.jpg"})
    form = MediaForm.for_media(media, navigator, routes, available_tags=["hero", "banner"])

    form.toggle_tag("banner")
    form.toggle_tag("hero")
    assert form.is_tag_selected("banner")
    assert not form.is_tag_selected("hero")

    await form.submit()

    put, follow = navigator.visits
    assert (put.method, put.url) == ("PUT", "/admin/media/3")
    assert put.data["tags"] == ["banner"]
    assert (follow.method, follow.url) == ("GET", "/admin/media")


# ── Contact ──


@pytest.mark.asyncio
async def test_contact_success_resets_and_toasts(navigator, routes, notifier, toast_host, instant_sleep):
    form = ContactForm(navigator, routes, notifier=notifier, sleep=instant_sleep)
    form.set_data({"name": "Sari", "email": "sari@example.com", "message": "Halo"})

    page = await form.submit()

    assert page is not None
    assert navigator.last.url == "/kontak"
    assert form.data["name"] == ""
    assert toast_host.history[-1].type is ToastType.SUCCESS
    assert not form.processing


@pytest.mark.asyncio
async def test_contact_failure_keeps_fields(navigator, routes, notifier, toast_host, instant_sleep):
    navigator.responses.append(NavigationError("POST", "/kontak", 500, "Server Error"))
    form = ContactForm(navigator, routes, notifier=notifier, sleep=instant_sleep)
    form.set_data("name", "Sari")

    assert await form.submit() is None
    assert form.data["name"] == "Sari"
    assert toast_host.history[-1].title == "Gagal mengirim pesan"


@pytest.mark.asyncio
async def test_contact_validation_errors_toast(navigator, routes, notifier, toast_host, instant_sleep):
    navigator.respond_with_errors(email="Email tidak valid")
    form = ContactForm(navigator, routes, notifier=notifier, sleep=instant_sleep)

    await form.submit()

    assert form.error("email") == "Email tidak valid"
    assert toast_host.history[-1].type is ToastType.ERROR


def test_form_registry():
    assert get_form("news") is NewsForm
    with pytest.raises(EntityNotFoundError):
        get_form("nope")
