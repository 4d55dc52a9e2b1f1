"""Default records inserted into each content collection on first use."""

from typing import Any

BLOG_POSTS: list[dict[str, Any]] = [
    {
        "slug": "complete-guide-link-building-2024",
        "title": "Complete Guide to Link Building in 2024",
        "excerpt": "Learn the strategies and tactics that top SEO agencies use to build high-quality backlinks.",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit...",
        "category": "Link Building",
        "author": {"name": "Sarah Chen", "role": "Head of SEO"},
        "date": "2024-01-15",
        "read_time": "12 min read",
        "featured": False,
        "status": "published",
        "views": 2340,
        "sort_order": 1,
    },
    {
        "slug": "how-build-high-quality-backlinks",
        "title": "How to Build High-Quality Backlinks",
        "excerpt": "Discover proven strategies for building authoritative backlinks that drive real SEO results.",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit...",
        "category": "SEO",
        "author": {"name": "John Doe", "role": "SEO Specialist"},
        "date": "2024-01-10",
        "read_time": "8 min read",
        "featured": False,
        "status": "published",
        "views": 1856,
        "sort_order": 2,
    },
    {
        "slug": "guest-posting-best-practices",
        "title": "Guest Posting Best Practices",
        "excerpt": "Learn how to effectively use guest posting as part of your link building strategy.",
        "content": "Lorem ipsum dolor sit amet, consectetur adipiscing elit...",
        "category": "Guest Posting",
        "author": {"name": "Emily Rodriguez", "role": "Content Strategist"},
        "date": "2024-01-08",
        "read_time": "10 min read",
        "featured": False,
        "status": "draft",
        "views": 0,
        "sort_order": 3,
    },
]

FAQS: list[dict[str, Any]] = [
    {
        "question": "What types of backlinks do you build?",
        "answer": "We focus on high-quality, white-hat backlinks from authoritative websites...",
        "visible": True,
        "status": "published",
        "sort_order": 1,
    },
    {
        "question": "How long until I see results?",
        "answer": "Most clients start seeing improvements in rankings within 2-3 months...",
        "visible": True,
        "status": "published",
        "sort_order": 2,
    },
    {
        "question": "Do you offer refunds?",
        "answer": "Yes, we offer a satisfaction guarantee. If you're not happy with our service...",
        "visible": True,
        "status": "published",
        "sort_order": 3,
    },
    {
        "question": "How Do We Communicate?",
        "answer": (
            "You can message our team 24/7 and you'll receive a same-day reply. Clients may also "
            "book a call anytime. We schedule regular meetings to review strategy and planning. "
            "You will receive a monthly update covering every backlink built and key insights "
            "related to your SEO goals."
        ),
        "visible": True,
        "status": "published",
        "sort_order": 4,
    },
]

TESTIMONIALS: list[dict[str, Any]] = [
    {
        "name": "Sarah Johnson",
        "role": "Marketing Director",
        "company": "TechStart Inc.",
        "quote": "Backlinkse transformed our SEO strategy. We saw a 340% increase in organic traffic within 6 months.",
        "rating": 5,
        "visible": True,
        "status": "published",
        "sort_order": 1,
    },
    {
        "name": "Michael Chen",
        "role": "CEO",
        "company": "GrowthLabs",
        "quote": "The quality of backlinks they deliver is exceptional. Our domain authority increased from 25 to 52.",
        "rating": 5,
        "visible": True,
        "status": "published",
        "sort_order": 2,
    },
    {
        "name": "Emily Davis",
        "role": "Head of Digital",
        "company": "E-Commerce Plus",
        "quote": "Professional team, transparent reporting, and real results. Highly recommend their services.",
        "rating": 5,
        "visible": True,
        "status": "published",
        "sort_order": 3,
    },
]

PRICING_PLANS: list[dict[str, Any]] = [
    {
        "name": "Startup",
        "price": 1500,
        "links_per_month": "5-8",
        "features": ["5-8 high-quality links/month", "DR 30-50 websites", "Monthly reporting", "Email support"],
        "popular": False,
        "sort_order": 1,
    },
    {
        "name": "Pro",
        "price": 3000,
        "links_per_month": "10-15",
        "features": [
            "10-15 high-quality links/month",
            "DR 40-60 websites",
            "Bi-weekly reporting",
            "Priority support",
            "Dedicated account manager",
        ],
        "popular": True,
        "sort_order": 2,
    },
    {
        "name": "Growth",
        "price": 5000,
        "links_per_month": "20-25",
        "features": [
            "20-25 high-quality links/month",
            "DR 50-70 websites",
            "Weekly reporting",
            "24/7 support",
            "Dedicated team",
            "Custom strategy",
        ],
        "popular": False,
        "sort_order": 3,
    },
    {
        "name": "Enterprise",
        "price": 10000,
        "links_per_month": "50+",
        "features": [
            "50+ high-quality links/month",
            "DR 60+ websites",
            "Real-time dashboard",
            "Dedicated team",
            "Custom everything",
            "SLA guarantee",
        ],
        "popular": False,
        "sort_order": 4,
    },
]
for _plan in PRICING_PLANS:
    _plan.update(enabled=True, button_text="Get Started", button_link="/contact")

LINK_BUILDING_PACKAGES: list[dict[str, Any]] = [
    {
        "name": "Starter",
        "price": 1500,
        "links_per_month": "5 links/month",
        "features": ["DR 30-50 websites", "Natural anchor text", "Monthly reporting", "30-day replacement guarantee"],
        "popular": False,
        "enabled": True,
        "sort_order": 1,
    },
    {
        "name": "Growth",
        "price": 3500,
        "links_per_month": "12 links/month",
        "features": [
            "DR 40-60 websites",
            "Custom anchor strategy",
            "Bi-weekly reporting",
            "60-day replacement guarantee",
            "Priority support",
        ],
        "popular": True,
        "enabled": True,
        "sort_order": 2,
    },
    {
        "name": "Scale",
        "price": 7000,
        "links_per_month": "25 links/month",
        "features": [
            "DR 50-70 websites",
            "Full SEO strategy",
            "Weekly reporting",
            "90-day replacement guarantee",
            "Dedicated account manager",
            "Content optimization",
        ],
        "popular": False,
        "enabled": True,
        "sort_order": 3,
    },
    {
        "name": "Enterprise",
        "price": None,
        "links_per_month": "50+ links/month",
        "features": [
            "DR 60+ websites",
            "White-label reporting",
            "Real-time dashboard",
            "Lifetime guarantee",
            "24/7 priority support",
            "Custom integrations",
        ],
        "popular": False,
        "enabled": True,
        "sort_order": 4,
    },
]

GUEST_POSTING_PACKAGES: list[dict[str, Any]] = [
    {
        "name": "Basic",
        "price": 299,
        "description": "Per post placement",
        "features": [
            "DR 30-40 websites",
            "500+ word article",
            "1 dofollow link",
            "Industry relevant sites",
            "Published within 14 days",
        ],
        "icon": "FileText",
        "popular": False,
        "enabled": True,
        "sort_order": 1,
    },
    {
        "name": "Premium",
        "price": 599,
        "description": "Per post placement",
        "features": [
            "DR 50-60 websites",
            "1000+ word article",
            "2 dofollow links",
            "High-traffic sites",
            "Published within 7 days",
            "Social media promotion",
        ],
        "icon": "Globe",
        "popular": False,
        "enabled": True,
        "sort_order": 2,
    },
    {
        "name": "Authority",
        "price": 999,
        "description": "Per post placement",
        "features": [
            "DR 70+ websites",
            "1500+ word article",
            "3 dofollow links",
            "Top-tier publications",
            "Published within 5 days",
            "Guaranteed indexing",
            "Press release distribution",
        ],
        "icon": "Zap",
        "popular": False,
        "enabled": True,
        "sort_order": 3,
    },
]

SERVICES: list[dict[str, Any]] = [
    {
        "service_id": "link-building",
        "name": "Monthly Link Building Packages",
        "slug": "/services/link-building",
        "description": (
            "Build high-quality backlinks from authoritative websites in your niche. Our white-hat "
            "link building strategies help improve your search rankings."
        ),
        "icon": "Link2",
        "packages": [
            {"name": "Starter", "price": 499},
            {"name": "Professional", "price": 999},
            {"name": "Enterprise", "price": 1999},
            {"name": "Custom", "price": 0},
        ],
        "sort_order": 1,
    },
    {
        "service_id": "guest-posting",
        "name": "Guest Posting Packages",
        "slug": "/services/guest-posting",
        "description": (
            "Get featured on high-authority websites in your industry through quality guest posts "
            "that build your brand and backlinks."
        ),
        "icon": "FileText",
        "packages": [
            {"name": "Starter", "price": 299},
            {"name": "Professional", "price": 699},
            {"name": "Enterprise", "price": 1499},
        ],
        "sort_order": 2,
    },
    {
        "service_id": "seo-blog-writing",
        "name": "SEO Blog Writing Services",
        "slug": "/services/seo-blog-writing",
        "description": "Professional SEO-optimized blog content that ranks well and drives organic traffic to your website.",
        "icon": "PenTool",
        "packages": [
            {"name": "Starter", "price": 199},
            {"name": "Professional", "price": 499},
            {"name": "Enterprise", "price": 999},
        ],
        "sort_order": 3,
    },
    {
        "service_id": "link-insertions",
        "name": "Link Insertions",
        "slug": "/services/link-insertions",
        "description": "Insert contextual backlinks into existing high-quality content on authoritative websites.",
        "icon": "Package",
        "packages": [
            {"name": "Starter", "price": 149},
            {"name": "Professional", "price": 399},
            {"name": "Enterprise", "price": 799},
        ],
        "sort_order": 4,
    },
    {
        "service_id": "platinum-links",
        "name": "Platinum Links",
        "slug": "/services/platinum-links",
        "description": "Premium backlinks from the most authoritative websites in your industry for maximum SEO impact.",
        "icon": "Award",
        "packages": [
            {"name": "Starter", "price": 599},
            {"name": "Professional", "price": 1299},
            {"name": "Enterprise", "price": 2499},
        ],
        "sort_order": 5,
    },
]
for _service in SERVICES:
    _service["status"] = "published"

HOMEPAGE_SECTIONS: list[dict[str, Any]] = [
    {
        "section_id": "client-logos",
        "name": "Trusted by 500+ Companies",
        "sort_order": 1,
        "content": {"heading": "Trusted by 500+ Companies Worldwide", "logos": []},
    },
    {
        "section_id": "intro",
        "name": "We Build Authoritative Backlinks",
        "sort_order": 2,
        "content": {
            "badge": "Welcome to Backlinkse",
            "mainHeading": "We build authoritative backlinks that",
            "highlightedText": "boost rankings and organic traffic",
            "description": (
                "Using a process-driven approach with a cutting-edge link building strategy, our "
                "link building services significantly improve your search engine rankings and SEO "
                "performance."
            ),
            "sectionImage": "",
        },
    },
    {
        "section_id": "results",
        "name": "We Get Results",
        "sort_order": 3,
        "content": {
            "sectionLabel": "Case Studies",
            "mainHeading": "We get",
            "highlightedWord": "results",
            "featuredCaseStudies": [
                "Career Guidance Service",
                "Employee Relocation",
                "Online Courses",
                "Snack Delivery",
            ],
        },
    },
    {
        "section_id": "pricing",
        "name": "Our Link Building Pricing",
        "sort_order": 4,
        "content": {
            "heading": "Our Link Building Pricing",
            "description": (
                "Choose a plan that fits your growth goals. All plans include white-hat link "
                "building with transparent reporting."
            ),
        },
    },
    {"section_id": "testimonials", "name": "Client Testimonials", "sort_order": 5, "content": {}},
    {
        "section_id": "comparison",
        "name": "Why Choose Backlinkse",
        "sort_order": 6,
        "content": {
            "sectionLabel": "Us vs. Competitors",
            "mainHeading": "Why choose Backlinkse?",
            "features": ["Strategist", "Analysis", "Sustainable", "Relationships", "Big Scale"],
        },
    },
    {"section_id": "faq", "name": "FAQs", "sort_order": 7, "content": {}},
    {
        "section_id": "cta",
        "name": "Ready to Build Your Authority",
        "sort_order": 8,
        "content": {
            "heading": "Ready to Build Your Authority?",
            "description": (
                "Join 500+ businesses that trust us to build their online authority through "
                "strategic link building."
            ),
            "primaryButtonText": "Get Started Today",
            "primaryButtonLink": "/contact",
            "secondaryButtonText": "Book a Call",
            "secondaryButtonLink": "https://calendly.com/backlinkse",
        },
    },
]
for _section in HOMEPAGE_SECTIONS:
    _section["enabled"] = True

CASE_STUDIES: list[dict[str, Any]] = [
    {
        "slug": "career-coaching-platform",
        "client": "Career Coaching Platform",
        "name": "Career Guidance Service",
        "industry": "Professional Services",
        "logo": "💼",
        "traffic_increase": "14,582%",
        "traffic_growth": "14,582%",
        "traffic_before": "241",
        "traffic_after": "36K",
        "links_built": 551,
        "dr_before": 12,
        "dr_after": 58,
        "keywords_top10": 847,
        "duration": "18 months",
        "featured_image": "/career-coaching-website-analytics-dashboard.jpg",
        "overview": (
            "A career coaching and resume writing service approached us with virtually no organic "
            "presence. Despite having excellent services and client testimonials, they were "
            "invisible in search results, relying entirely on paid advertising for leads. Our "
            "mission was to build their domain authority from the ground up and establish them as "
            "a trusted resource in the career development space."
        ),
        "challenges": [
            "Domain Rating of only 12 with minimal backlink profile",
            "Competing against established job boards and career sites with DRs of 70+",
            "No existing content strategy or keyword targeting",
            "Limited brand recognition in a crowded market",
            "High customer acquisition costs from paid channels",
        ],
        "strategy": [
            "Conducted comprehensive competitor backlink analysis to identify link opportunities",
            "Developed a content hub strategy focused on career advice and interview tips",
            "Targeted guest posting opportunities on HR, business, and career publications",
            "Built relationships with career coaches and HR professionals for natural link acquisition",
            "Implemented digital PR campaigns around job market trends and salary data",
        ],
        "execution": [
            "Month 1-3: Foundation building with 45 high-quality guest posts on relevant industry sites",
            "Month 4-6: Launched career statistics resource page that attracted natural editorial links",
            "Month 7-12: Scaled link acquisition to 40+ links per month while maintaining quality standards",
            "Month 13-18: Focused on competitive keyword targeting with strategic anchor text distribution",
        ],
        "results": [
            {"label": "Organic Traffic", "before": "241/mo", "after": "36,000/mo", "change": "+14,582%"},
            {"label": "Domain Rating", "before": "12", "after": "58", "change": "+46 points"},
            {"label": "Keywords in Top 10", "before": "23", "after": "847", "change": "+3,582%"},
            {"label": "Monthly Leads", "before": "8", "after": "340", "change": "+4,150%"},
        ],
        "testimonial": {
            "quote": (
                "We went from being invisible online to ranking #1 for our most valuable keywords. "
                "The ROI has been incredible - our cost per lead dropped by 80% while lead quality "
                "actually improved."
            ),
            "author": "Sarah Mitchell",
            "role": "Founder & CEO",
        },
        "status": "published",
        "sort_order": 1,
    },
    {
        "slug": "employee-relocation-service",
        "client": "Employee Relocation Service",
        "name": "Employee Relocation Service",
        "industry": "Corporate Services",
        "logo": "🏢",
        "traffic_increase": "6,098%",
        "traffic_growth": "6,098%",
        "traffic_before": "357",
        "traffic_after": "22.1K",
        "links_built": 262,
        "dr_before": 18,
        "dr_after": 52,
        "keywords_top10": 423,
        "duration": "14 months",
        "featured_image": "/corporate-relocation-services-analytics.jpg",
        "overview": (
            "A B2B employee relocation company serving Fortune 500 clients needed to establish "
            "thought leadership and capture high-intent search traffic. Their services were "
            "excellent but their online visibility was poor, causing them to lose deals to "
            "competitors with stronger digital presence."
        ),
        "challenges": [
            "B2B niche with long sales cycles and complex decision-making processes",
            "Limited content resources and internal marketing capacity",
            "Competing against national relocation firms with established brands",
            "Need for highly targeted traffic from HR directors and C-suite executives",
            "Geographic targeting requirements for multiple service areas",
        ],
        "strategy": [
            "Focused on building links from HR, business, and real estate publications",
            "Created comprehensive relocation guides targeting specific metro areas",
            "Developed thought leadership content around remote work and employee mobility trends",
            "Targeted niche industry publications read by HR decision-makers",
            "Built relationships with commercial real estate and corporate housing sites",
        ],
        "execution": [
            "Month 1-4: Secured 85 placements on HR and business publications",
            "Month 5-8: Launched city-specific relocation guides with localized link building",
            "Month 9-14: Expanded into digital PR with employee mobility research reports",
        ],
        "results": [
            {"label": "Organic Traffic", "before": "357/mo", "after": "22,100/mo", "change": "+6,098%"},
            {"label": "Domain Rating", "before": "18", "after": "52", "change": "+34 points"},
            {"label": "Enterprise Leads", "before": "2/mo", "after": "28/mo", "change": "+1,300%"},
            {"label": "Average Deal Size", "before": "$45K", "after": "$78K", "change": "+73%"},
        ],
        "status": "published",
        "sort_order": 2,
    },
    {
        "slug": "online-learning-platform",
        "client": "Online Learning Platform",
        "name": "Online Courses Platform",
        "industry": "EdTech",
        "logo": "📚",
        "traffic_increase": "84%",
        "traffic_growth": "84%",
        "traffic_before": "5M",
        "traffic_after": "9.3M",
        "links_built": 682,
        "dr_before": 65,
        "dr_after": 78,
        "keywords_top10": 12500,
        "duration": "12 months",
        "featured_image": "/online-education-platform-growth-chart.jpg",
        "overview": (
            "An established online learning platform with millions of monthly visitors engaged us "
            "to accelerate their growth and defend market position against well-funded "
            "competitors. Despite their existing success, they were losing ground on key "
            "educational keywords."
        ),
        "challenges": [
            "Already high domain authority made incremental gains more difficult",
            "Aggressive competition from venture-backed EdTech startups",
            "Need to maintain link quality standards at scale",
            "Broad keyword portfolio requiring diverse link sources",
            "International expansion requiring multi-language link building",
        ],
        "strategy": [
            "Implemented enterprise-scale link building across 6 countries",
            "Created linkable assets including industry reports and free tools",
            "Developed scholarship programs that attracted .edu backlinks",
            "Partnered with educational institutions for co-branded content",
            "Launched podcast sponsorship campaign targeting learning-focused shows",
        ],
        "execution": [
            "Month 1-3: Audit of existing backlink profile and competitor gap analysis",
            "Month 4-6: Launched 3 major linkable assets generating 200+ organic backlinks",
            "Month 7-12: Scaled international link building across EU, UK, and APAC markets",
        ],
        "results": [
            {"label": "Organic Traffic", "before": "5M/mo", "after": "9.3M/mo", "change": "+84%"},
            {"label": "Domain Rating", "before": "65", "after": "78", "change": "+13 points"},
            {"label": "Revenue from Organic", "before": "$2.1M/mo", "after": "$4.2M/mo", "change": "+100%"},
            {"label": "Market Share", "before": "12%", "after": "19%", "change": "+58%"},
        ],
        "testimonial": {
            "quote": (
                "At our scale, finding a link building partner that could move the needle seemed "
                "impossible. They not only delivered but helped us capture significant market share "
                "from our biggest competitors."
            ),
            "author": "James Chen",
            "role": "VP of Growth",
        },
        "status": "published",
        "sort_order": 3,
    },
    {
        "slug": "healthy-snacks-delivery",
        "client": "Healthy Snacks Delivery",
        "name": "Snack Delivery Service",
        "industry": "E-Commerce",
        "logo": "🥗",
        "traffic_increase": "2,341%",
        "traffic_growth": "2,341%",
        "traffic_before": "428K",
        "traffic_after": "995K",
        "links_built": 423,
        "dr_before": 48,
        "dr_after": 67,
        "keywords_top10": 2840,
        "duration": "18 months",
        "featured_image": "/healthy-snack-subscription-box-ecommerce.jpg",
        "overview": (
            "A direct-to-consumer healthy snack subscription service needed to compete against "
            "major retailers and established snack brands in organic search. Their products were "
            "exceptional but their SEO could not match the marketing budgets of bigger players."
        ),
        "challenges": [
            "Competing against Amazon, Walmart, and major CPG brands",
            "Seasonal fluctuations in snack-related search volume",
            "Limited budget compared to enterprise competitors",
            "Need for both branded and non-branded keyword growth",
            "High customer acquisition costs threatening profitability",
        ],
        "strategy": [
            "Focused on food, health, and lifestyle publication placements",
            "Created nutrition guides and healthy eating resources as link magnets",
            "Developed influencer partnership program with food bloggers",
            "Targeted health and wellness podcasts for brand mentions and links",
            "Built links around specific diet trends (keto, paleo, vegan)",
        ],
        "execution": [
            "Month 1-4: Secured 150 placements on food and health blogs",
            "Month 5-10: Launched diet-specific landing pages with targeted link building",
            "Month 11-18: Scaled successful tactics while testing new link sources",
        ],
        "results": [
            {"label": "Organic Traffic", "before": "428K/mo", "after": "995K/mo", "change": "+132%"},
            {"label": "Domain Rating", "before": "48", "after": "67", "change": "+19 points"},
            {"label": "Organic Revenue", "before": "$890K/mo", "after": "$2.4M/mo", "change": "+170%"},
            {"label": "CAC Reduction", "before": "$28", "after": "$14", "change": "-50%"},
        ],
        "status": "draft",
        "sort_order": 4,
    },
]

# Singleton configuration defaults. Each is inserted as the active record.

THEME: dict[str, Any] = {
    "active_color_hue": 155,
    "dark_mode": False,
    "primary_font": "Inter",
    "heading_font": "Inter",
    "base_font_size": "16px",
    "border_radius": 0.625,
    "color_presets": [
        {"name": "Green", "hue": 155, "color": "oklch(0.65 0.2 155)"},
        {"name": "Blue", "hue": 260, "color": "oklch(0.65 0.22 260)"},
        {"name": "Purple", "hue": 280, "color": "oklch(0.65 0.2 280)"},
        {"name": "Orange", "hue": 30, "color": "oklch(0.65 0.2 30)"},
        {"name": "Teal", "hue": 180, "color": "oklch(0.65 0.2 180)"},
        {"name": "Pink", "hue": 330, "color": "oklch(0.65 0.2 330)"},
    ],
}

LOGIN_BUTTON = {"text": "Log In", "href": "/login", "visible": True}
SIGN_UP_BUTTON = {"text": "Sign Up", "href": "/signup", "visible": True}
DASHBOARD_BUTTON = {"text": "Dashboard", "href": "/dashboard", "visible": True, "showWhenLoggedIn": True}

NAVIGATION: dict[str, Any] = {
    "header_links": [
        {"label": "Home", "href": "/", "visible": True},
        {"label": "Services", "href": "/services", "visible": True},
        {"label": "Pricing", "href": "/pricing", "visible": True},
        {"label": "Case Studies", "href": "/case-studies", "visible": True},
        {"label": "Blog", "href": "/blog", "visible": True},
        {"label": "Contact", "href": "/contact", "visible": True},
    ],
    "login_button": LOGIN_BUTTON,
    "sign_up_button": SIGN_UP_BUTTON,
    "dashboard_button": DASHBOARD_BUTTON,
    "footer_sections": [
        {
            "title": "Services",
            "links": [
                {"label": "Link Building", "href": "/services/link-building"},
                {"label": "Guest Posting", "href": "/services/guest-posting"},
                {"label": "SEO Consulting", "href": "/services/seo-consulting"},
            ],
        },
        {
            "title": "Company",
            "links": [
                {"label": "About Us", "href": "/about"},
                {"label": "Case Studies", "href": "/case-studies"},
                {"label": "Blog", "href": "/blog"},
            ],
        },
        {
            "title": "Legal",
            "links": [
                {"label": "Privacy Policy", "href": "/privacy"},
                {"label": "Terms of Service", "href": "/terms"},
                {"label": "Refund Policy", "href": "/refund"},
            ],
        },
    ],
    "contact_email": "hello@backlinkse.com",
    "whatsapp_number": "+1 234 567 890",
    "twitter_url": "https://twitter.com/backlinkse",
    "linked_in_url": "https://linkedin.com/company/backlinkse",
}

CRISP_WIDGET_SCRIPT = """window.$crisp = [];
window.CRISP_WEBSITE_ID = "your-crisp-website-id";
(function() {
  var d = document;
  var s = d.createElement("script");
  s.src = "https://client.crisp.chat/l.js";
  s.async = 1;
  d.getElementsByTagName("head")[0].appendChild(s);
})();"""

LIVE_CHAT: dict[str, Any] = {
    "enabled": True,
    "widget_script": CRISP_WIDGET_SCRIPT,
    "display_on": "all",
    "auto_reply_message": "Thanks for reaching out! We'll get back to you shortly.",
    "support_email": "support@backlinkse.com",
}

GLOBAL_SETTINGS: dict[str, Any] = {
    "site_logo": "",
    "favicon": "",
    "site_name": "Backlinkse",
    "tagline": "Professional Link Building Agency",
    "contact_email": "hello@backlinkse.com",
    "support_email": "support@backlinkse.com",
    "whatsapp_number": "+1 234 567 890",
    "business_address": "123 Business St, Suite 100, New York, NY 10001",
    "calendly_link": "https://calendly.com/backlinkse/consultation",
    "dashboard_url": "/dashboard",
    "case_studies_external_url": "https://v0-backlinkse.vercel.app/case-studies",
    "default_meta_title": "Backlinkse - Professional Link Building Agency",
    "default_meta_description": (
        "Build high-quality backlinks and improve your search rankings with Backlinkse. "
        "Trusted by 500+ companies worldwide."
    ),
    "google_analytics_id": "",
    "admin_email": "admin@backlinkse.com",
    "two_factor_auth_enabled": False,
    "session_expiry_enabled": True,
    "activity_logging_enabled": True,
    "brute_force_protection_enabled": True,
}
