from notary_site.models.announcement import Announcement
from notary_site.models.banner import Banner
from notary_site.models.gallery import GalleryItem
from notary_site.models.information import Information
from notary_site.models.link import Link
from notary_site.models.news import NewsItem
from notary_site.models.page import Page
from notary_site.models.review_image import ReviewImage
from notary_site.models.service import Service
from notary_site.schemas import content as s
from notary_site.services.content import Resource

# One entry per admin-manageable content type; routers and dashboard are built from this list.
RESOURCES = [
    Resource("banners", "banners", "banner", Banner, s.BannerCreate, s.BannerUpdate, s.BannerOut),
    Resource("services", "services", "service", Service, s.ServiceCreate, s.ServiceUpdate, s.ServiceOut),
    Resource("links", "links", "link", Link, s.LinkCreate, s.LinkUpdate, s.LinkOut),
    Resource("news", "news", "news_item", NewsItem, s.NewsCreate, s.NewsUpdate, s.NewsOut, newest_first=True),
    Resource(
        "pages", "pages", "page", Page, s.PageCreate, s.PageUpdate, s.PageOut,
        lookup_field="slug", unique_fields=("slug",),
    ),
    Resource(
        "review-images", "review_images", "review_image", ReviewImage,
        s.ReviewImageCreate, s.ReviewImageUpdate, s.ReviewImageOut,
    ),
    Resource(
        "announcements", "announcements", "announcement", Announcement,
        s.AnnouncementCreate, s.AnnouncementUpdate, s.AnnouncementOut,
    ),
    Resource("gallery", "gallery", "gallery_item", GalleryItem, s.GalleryCreate, s.GalleryUpdate, s.GalleryOut),
    Resource(
        "information", "information", "information", Information,
        s.InformationCreate, s.InformationUpdate, s.InformationOut,
    ),
]

RESOURCES_BY_PATH = {r.path: r for r in RESOURCES}
