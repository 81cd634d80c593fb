"""Bootstrap documents written the first time a page file is read."""
from database import utc_now

SETTINGS_FILE = "settings.json"
HOME_CONTENT_FILE = "home-content.json"
ABOUT_FILE = "about.json"
CONTACT_PAGE_FILE = "contact-page.json"
PROPERTY_PAGE_FILE = "property-page.json"
GUIDE_FILE = "uttarakhand-guide.json"
REGIONS_FILE = "regions.json"

PROPERTIES_FILE = "properties.json"
INQUIRIES_FILE = "inquiries.json"
CONTACT_MESSAGES_FILE = "contact-messages.json"
CONTENT_FILE = "content.json"


def default_settings():
    return {
        "siteName": "360° Real Estate",
        "contactEmail": "info@360degreesrealestate.in",
        "phoneNumber": "+91 9759866333",
        "mainLocation": "Dehradun, Uttarakhand",
        "metaTitle": "360° Real Estate - Properties in Uttarakhand",
        "metaDescription": (
            "Find your dream property in Uttarakhand with 360° Real Estate. We offer a wide range "
            "of properties including residential, commercial, and agricultural."
        ),
        "featuredPropertiesCount": "3",
        "enableVirtualTours": True,
        "socialLinks": {"facebook": "", "instagram": "", "youtube": "", "whatsapp": ""},
        "updatedAt": utc_now(),
    }


def default_home_content():
    return {
        "id": "home-page",
        "heroTitle": "Search Your Real Estate Requirement",
        "heroSubtitle": "Find luxury properties in Uttarakhand with stunning mountain views",
        "heroBackgroundImage": "/images/uttarakhand-bg.svg",
        "featuredSectionTitle": "Featured Properties",
        "whyChooseUsTitle": "Why Choose Our Properties?",
        "whyChooseUsFeatures": [
            {
                "title": "Prime Locations",
                "description": "All our properties are situated in the most scenic and convenient locations for your dream home.",
                "icon": "location",
            },
            {
                "title": "Competitive Pricing",
                "description": "We offer the best value for your investment with transparent pricing and no hidden fees.",
                "icon": "price",
            },
            {
                "title": "Verified Properties",
                "description": "Every listing is thoroughly verified for authenticity and legal compliance.",
                "icon": "verify",
            },
        ],
        "aboutSectionTitle": "About Uttarakhand Real Estate",
        "aboutSectionContent": (
            "Discover the beauty of owning property in Uttarakhand, where nature meets luxury. Our curated "
            "collection of properties provides the perfect blend of modern amenities and natural splendor."
        ),
        "seoTitle": "Luxury Properties in Uttarakhand | Find Your Dream Home",
        "seoDescription": (
            "Explore premium real estate in Uttarakhand. Find luxury homes, plots, and investment "
            "properties with stunning mountain views."
        ),
        "customSections": [],
        "updatedAt": utc_now(),
    }


def default_about_content():
    return {
        "title": "About Us",
        "subtitle": "Learn more about our real estate company",
        "mainContent": (
            "We are a premier real estate company specializing in luxury properties in Uttarakhand. "
            "With years of experience and deep local knowledge, we help clients find their perfect "
            "property in this beautiful region."
        ),
        "mission": (
            "Our mission is to help clients find their dream properties while ensuring sustainable "
            "development in the pristine Himalayan region."
        ),
        "vision": (
            "We envision creating a platform where finding premium properties in Uttarakhand is "
            "seamless, transparent, and enjoyable."
        ),
        "bannerImage": "",
        "ceoSection": {
            "name": "",
            "position": "Chief Executive Officer",
            "bio": "",
            "imageUrl": "",
            "socialLinks": {"facebook": "", "instagram": "", "linkedin": "", "twitter": ""},
        },
        "teamSection": {
            "title": "Our Team",
            "subtitle": "Meet the people who make it all happen",
            "members": [],
        },
        "updatedAt": utc_now(),
    }


def default_contact_page():
    return {
        "title": "Contact Us",
        "subtitle": "We're here to assist you with any queries about Uttarakhand properties",
        "heroImage": "",
        "getInTouchText": (
            "Whether you're looking to buy, sell, or lease property in Uttarakhand, our team of experts "
            "is ready to assist you. Fill out the form, and we'll get back to you as soon as possible."
        ),
        "officeLocation": {"address": "Mall Road, Almora, Uttarakhand", "mapEmbed": "", "showMap": True},
        "contactInfo": {
            "email": "info@360degreesrealestate.in",
            "phone": "+91 98765 43210",
            "whatsapp": "919759866333",
        },
        "operatingHours": {
            "weekdays": "Monday - Saturday: 9 AM - 6 PM",
            "weekends": "Sunday: By Appointment Only",
        },
        "faqSection": {
            "title": "Frequently Asked Questions",
            "subtitle": "",
            "faqs": [
                {
                    "question": "How can I schedule a property visit?",
                    "answer": "Fill out our contact form, call us directly, or send us an email and we will arrange a convenient time.",
                },
                {
                    "question": "Do you offer virtual property tours?",
                    "answer": "Yes, we offer 360° virtual tours so you can explore properties remotely.",
                },
                {
                    "question": "What areas in Uttarakhand do you cover?",
                    "answer": "Mainly the Kumaon region, including Nainital, Almora, Bhimtal, Mukteshwar and Ranikhet, with select Garhwal listings.",
                },
            ],
        },
        "updatedAt": utc_now(),
    }


def default_property_page():
    return {
        "heroImage": "/images/properties-banner.jpg",
        "heroHeading": "Find Your Dream Property",
        "heroSubheading": "Explore our curated selection of premium properties",
        "mainContent": (
            "We offer a wide range of properties to meet your needs and preferences. From luxury villas "
            "to affordable apartments, our portfolio has something for everyone."
        ),
    }


def default_guide():
    return {
        "title": "Uttarakhand Guide",
        "subtitle": "Discover the beauty and opportunities in Uttarakhand",
        "content": (
            "<h2>Welcome to our Uttarakhand Guide</h2>"
            "<p>Uttarakhand, known as the \"Land of Gods\", is a state in northern India known for its "
            "natural beauty, temples, and as a destination for yoga and hiking.</p>"
            "<h3>Why Invest in Uttarakhand?</h3>"
            "<ul><li>Growing tourism industry</li><li>Developing infrastructure</li>"
            "<li>Attractive property prices compared to metropolitan cities</li>"
            "<li>Potential for excellent rental returns from vacation homes</li></ul>"
        ),
        "heroImage": "/images/uttarakhand-mountains.jpg",
        "metaTitle": "Uttarakhand Guide - 360° Real Estate",
        "metaDescription": (
            "Everything you need to know about Uttarakhand - tourism, property investment, local "
            "attractions, and more."
        ),
    }


def default_regions():
    return [
        {
            "id": "almora",
            "name": "Almora",
            "description": [
                "The cultural heart of the Kumaon region, with a history dating back to the Chand dynasty.",
                "Lower tourist density than Nainital and an authentic mountain lifestyle.",
            ],
            "imageUrl": "/images/regions/almora.jpg",
            "altitude": "1,642 m",
            "climate": "Warm summers (15-25°C), cold winters (0-10°C)",
            "connectivity": "80 km from Nainital; nearest railhead Kathgodam",
            "distanceFromDelhi": "370 km",
            "propertyHighlights": ["Heritage cottages", "Orchard estates", "Himalayan views"],
        },
        {
            "id": "nainital",
            "name": "Nainital",
            "description": [
                "The lake district of Uttarakhand, surrounded by seven hills.",
                "A favourite holiday destination since the colonial era.",
            ],
            "imageUrl": "/images/regions/nainital.jpg",
            "altitude": "2,084 m",
            "climate": "Warm summers (15-30°C), cold winters (0-15°C)",
            "connectivity": "65 km from Kathgodam railway station",
            "distanceFromDelhi": "290 km",
            "propertyHighlights": ["Lake-view apartments", "Boutique hotels", "Holiday homes"],
        },
        {
            "id": "pauri",
            "name": "Pauri",
            "description": [
                "A quiet Garhwal hill town with sweeping views of the snow peaks.",
            ],
            "imageUrl": "/images/regions/pauri.jpg",
            "altitude": "1,814 m",
            "climate": "Mild summers, cold winters with occasional snowfall",
            "connectivity": "108 km from Kotdwar railway station",
            "distanceFromDelhi": "330 km",
            "propertyHighlights": ["Agricultural land", "Homestay plots"],
        },
        {
            "id": "uttarkashi",
            "name": "Uttarkashi",
            "description": [
                "A pilgrimage and trekking base on the banks of the Bhagirathi.",
            ],
            "imageUrl": "/images/regions/uttarkashi.jpg",
            "altitude": "1,158 m",
            "climate": "Pleasant summers, cold winters",
            "connectivity": "145 km from Dehradun",
            "distanceFromDelhi": "400 km",
            "propertyHighlights": ["Riverside land", "Adventure tourism stays"],
        },
    ]
