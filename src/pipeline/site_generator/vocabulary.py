"""Industry vocabulary used by the rich content generators.

Every industry id maps to one complete ``IndustryVocabulary`` record: the
phrases the long-form page copy is assembled from (symptoms, causes, badges,
FAQ wording). Lookups for ids without an entry return
``DEFAULT_VOCABULARY``, so generated prose is never blank.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IndustryVocabulary:
    professionals: str
    section_badge: str
    common_issue: str
    common_service: str
    emergency_issue: str
    hero_service: str
    damage_type: str
    service_features: tuple[str, str]
    signs: tuple[str, str, str, str, str]
    causes: tuple[str, str, str, str, str]
    emergency_scenario: str
    waiting_advice: str


DEFAULT_VOCABULARY = IndustryVocabulary(
    professionals="professionals",
    section_badge="✓ Professional Services",
    common_issue="unexpected problems",
    common_service="professional assistance",
    emergency_issue="emergencies",
    hero_service="professional services for all your needs",
    damage_type="property damage",
    service_features=(
        "Professional equipment",
        "Expert technicians",
    ),
    signs=(
        "Visible damage or wear",
        "Unusual sounds or smells",
        "Performance issues",
        "Safety concerns",
        "Increasing problems over time",
    ),
    causes=(
        "Normal wear and tear",
        "Weather-related damage",
        "Lack of maintenance",
        "Age of equipment or materials",
        "External factors and accidents",
    ),
    emergency_scenario="an urgent situation requiring immediate attention",
    waiting_advice="Stay safe and avoid attempting repairs yourself.",
)

INDUSTRY_VOCABULARY: dict[str, IndustryVocabulary] = {
    "restoration": IndustryVocabulary(
        professionals="restoration technicians",
        section_badge="🔧 Restoration Services",
        common_issue="water damage, fire damage, or mold growth",
        common_service="emergency restoration",
        emergency_issue="water damage emergencies",
        hero_service="water damage restoration, fire damage cleanup, and mold remediation",
        damage_type="water damage",
        service_features=(
            "State-of-the-art drying equipment",
            "Complete moisture detection",
        ),
        signs=(
            "Visible water pooling or staining on floors and walls",
            "Musty odors indicating hidden moisture or mold",
            "Peeling paint, bubbling wallpaper, or warped surfaces",
            "Increased humidity levels inside the property",
            "Discoloration or dark spots on ceilings and walls",
        ),
        causes=(
            "Burst or leaking pipes and plumbing failures",
            "Storm damage and flooding from heavy rainfall",
            "Appliance malfunctions (water heaters, washing machines)",
            "Roof leaks and foundation cracks",
            "Sewage backups and drain overflows",
        ),
        emergency_scenario="a major water leak that flooded our entire first floor",
        waiting_advice="If safe, turn off the water source and move valuables to a dry area.",
    ),
    "plumbing": IndustryVocabulary(
        professionals="plumbers",
        section_badge="🔧 Plumbing Services",
        common_issue="leaky pipes, clogged drains, or water heater problems",
        common_service="pipe repair and installation",
        emergency_issue="plumbing emergencies",
        hero_service="pipe repair, drain cleaning, and water heater services",
        damage_type="plumbing damage",
        service_features=(
            "Video camera pipe inspection",
            "Trenchless repair technology",
        ),
        signs=(
            "Slow draining sinks, tubs, or showers",
            "Gurgling sounds coming from drains",
            "Water stains on walls or ceilings",
            "Unexplained increase in water bills",
            "Low water pressure throughout the home",
        ),
        causes=(
            "Aging pipes and corroded plumbing",
            "Tree root infiltration into sewer lines",
            "Clogged drains from grease, hair, and debris",
            "Frozen pipes during cold weather",
            "High water pressure causing pipe stress",
        ),
        emergency_scenario="a burst pipe in our basement",
        waiting_advice="Shut off the main water supply to prevent further damage.",
    ),
    "hvac": IndustryVocabulary(
        professionals="HVAC technicians",
        section_badge="❄️ HVAC Services",
        common_issue="AC problems, heating failures, or poor air quality",
        common_service="system maintenance and repair",
        emergency_issue="heating or cooling emergencies",
        hero_service="AC repair, heating installation, and air quality services",
        damage_type="HVAC issues",
        service_features=(
            "Energy efficiency optimization",
            "Complete system diagnostics",
        ),
        signs=(
            "Unusual noises from heating or cooling units",
            "Uneven temperatures throughout the home",
            "Increased energy bills without usage changes",
            "Poor air quality or dusty conditions",
            "System frequently cycling on and off",
        ),
        causes=(
            "Clogged filters restricting airflow",
            "Refrigerant leaks in AC systems",
            "Thermostat malfunctions or calibration issues",
            "Worn belts, bearings, or motors",
            "Ductwork leaks and insulation problems",
        ),
        emergency_scenario="our AC unit completely stopped working during a heat wave",
        waiting_advice="Check your thermostat settings and circuit breakers first.",
    ),
    "roofing": IndustryVocabulary(
        professionals="roofing specialists",
        section_badge="🏠 Roofing Services",
        common_issue="leaks, storm damage, or aging shingles",
        common_service="roof repair and replacement",
        emergency_issue="roofing emergencies",
        hero_service="roof repair, replacement, and storm damage restoration",
        damage_type="roof damage",
        service_features=(
            "Comprehensive roof inspections",
            "Premium material options",
        ),
        signs=(
            "Missing, cracked, or curling shingles",
            "Water stains on interior ceilings",
            "Daylight visible through the roof boards",
            "Granules collecting in gutters",
            "Sagging areas on the roof surface",
        ),
        causes=(
            "Severe weather including hail and high winds",
            "Age and natural wear of roofing materials",
            "Poor installation or inadequate ventilation",
            "Debris accumulation and clogged gutters",
            "Tree branches rubbing against the roof",
        ),
        emergency_scenario="major storm damage that left a section of our roof exposed",
        waiting_advice="If safe, place tarps over exposed areas to minimize water intrusion.",
    ),
    "electrical": IndustryVocabulary(
        professionals="electricians",
        section_badge="⚡ Electrical Services",
        common_issue="power outages, wiring problems, or circuit issues",
        common_service="electrical repairs and upgrades",
        emergency_issue="electrical emergencies",
        hero_service="electrical repair, panel upgrades, and safety inspections",
        damage_type="electrical issues",
        service_features=(
            "Complete safety inspections",
            "Code-compliant installations",
        ),
        signs=(
            "Flickering or dimming lights",
            "Frequently tripping circuit breakers",
            "Burning smell near outlets or switches",
            "Warm or discolored wall plates",
            "Buzzing sounds from electrical panels",
        ),
        causes=(
            "Outdated wiring and overloaded circuits",
            "Faulty or damaged electrical components",
            "Water damage affecting electrical systems",
            "Improper DIY electrical work",
            "Pest damage to wiring",
        ),
        emergency_scenario="a complete power outage affecting half of our house",
        waiting_advice="Turn off power at the main breaker if you smell burning.",
    ),
    "agency": IndustryVocabulary(
        professionals="creative professionals",
        section_badge="🚀 Agency Services",
        common_issue="brand visibility, digital presence, or marketing challenges",
        common_service="strategic marketing and branding",
        emergency_issue="urgent marketing needs",
        hero_service="branding, web design, digital marketing, and creative strategy",
        damage_type="brand challenges",
        service_features=(
            "Data-driven creative strategies",
            "Full-service marketing solutions",
        ),
        signs=(
            "Declining website traffic or engagement",
            "Inconsistent brand messaging across channels",
            "Low conversion rates on marketing campaigns",
            "Outdated website or visual identity",
            "Difficulty standing out from competitors",
        ),
        causes=(
            "Lack of cohesive brand strategy",
            "Outdated digital marketing approaches",
            "Poor website user experience",
            "Inconsistent content creation",
            "Missing target audience alignment",
        ),
        emergency_scenario="launching a new product and need full marketing support",
        waiting_advice="Gather your brand assets and marketing goals for our initial consultation.",
    ),
    "marketing": IndustryVocabulary(
        professionals="marketing strategists",
        section_badge="📈 Marketing Services",
        common_issue="low visibility, poor ROI, or stagnant growth",
        common_service="digital marketing and growth strategies",
        emergency_issue="urgent campaign needs",
        hero_service="SEO, PPC advertising, social media marketing, and content strategy",
        damage_type="marketing challenges",
        service_features=(
            "ROI-focused campaign optimization",
            "Multi-channel marketing expertise",
        ),
        signs=(
            "Low search engine rankings",
            "Poor social media engagement",
            "High cost per acquisition",
            "Declining lead quality",
            "Competitors outranking your business",
        ),
        causes=(
            "Lack of keyword optimization",
            "Inconsistent posting schedule",
            "Poor targeting in ad campaigns",
            "Outdated content strategy",
            "Missing analytics and tracking",
        ),
        emergency_scenario="need to boost sales quickly for an upcoming product launch",
        waiting_advice="Review your current analytics and identify your key performance goals.",
    ),
    "landscaping": IndustryVocabulary(
        professionals="landscaping experts",
        section_badge="🌿 Landscaping Services",
        common_issue="overgrown yards, dead plants, or drainage problems",
        common_service="landscape design and maintenance",
        emergency_issue="urgent yard work needs",
        hero_service="lawn care, hardscaping, tree services, and irrigation",
        damage_type="landscape issues",
        service_features=(
            "Custom landscape design",
            "Sustainable solutions",
        ),
        signs=(
            "Brown patches or dead grass",
            "Overgrown shrubs blocking walkways",
            "Standing water after rainfall",
            "Weeds overtaking flower beds",
            "Uneven or patchy lawn growth",
        ),
        causes=(
            "Improper watering or irrigation",
            "Poor soil quality or drainage",
            "Lack of regular maintenance",
            "Wrong plants for your climate",
            "Pest or disease infestation",
        ),
        emergency_scenario="our yard is completely overgrown before a big event",
        waiting_advice="Take photos of your current yard to share with our designers.",
    ),
    "legal": IndustryVocabulary(
        professionals="attorneys",
        section_badge="⚖️ Legal Services",
        common_issue="legal disputes, contracts, or compliance questions",
        common_service="legal consultation and representation",
        emergency_issue="urgent legal matters",
        hero_service="business law, personal injury, estate planning, and litigation",
        damage_type="legal challenges",
        service_features=(
            "Experienced trial attorneys",
            "Personalized legal strategies",
        ),
        signs=(
            "Received legal notice or summons",
            "Contract disputes with vendors or partners",
            "Need to protect intellectual property",
            "Estate planning concerns",
            "Business compliance questions",
        ),
        causes=(
            "Unclear contract terms",
            "Business partner disagreements",
            "Regulatory changes in your industry",
            "Personal injury from accidents",
            "Family law matters",
        ),
        emergency_scenario="facing a lawsuit and need immediate legal representation",
        waiting_advice="Gather all relevant documents and correspondence before our consultation.",
    ),
    "realestate": IndustryVocabulary(
        professionals="real estate agents",
        section_badge="🏡 Real Estate Services",
        common_issue="buying, selling, or finding the perfect property",
        common_service="property buying and selling assistance",
        emergency_issue="time-sensitive property needs",
        hero_service="home buying, selling, property valuation, and market analysis",
        damage_type="real estate challenges",
        service_features=(
            "Local market expertise",
            "Negotiation specialists",
        ),
        signs=(
            "Ready to sell but unsure of home value",
            "Struggling to find the right property",
            "Need help navigating the buying process",
            "Relocating and need local guidance",
            "Investment property opportunities",
        ),
        causes=(
            "Changing market conditions",
            "First-time buyer uncertainty",
            "Complex negotiation situations",
            "Property inspection concerns",
            "Financing and mortgage questions",
        ),
        emergency_scenario="found our dream home and need to act fast",
        waiting_advice="Have your pre-approval ready and know your must-have features.",
    ),
    "automotive": IndustryVocabulary(
        professionals="automotive technicians",
        section_badge="🚗 Automotive Services",
        common_issue="engine problems, brake issues, or maintenance needs",
        common_service="vehicle repair and maintenance",
        emergency_issue="urgent car repair needs",
        hero_service="engine repair, brake service, oil changes, and diagnostics",
        damage_type="automotive issues",
        service_features=(
            "State-of-the-art diagnostics",
            "Factory-trained technicians",
        ),
        signs=(
            "Check engine light is on",
            "Strange noises when braking",
            "Vehicle pulling to one side",
            "Engine running rough or stalling",
            "Unusual smells from the car",
        ),
        causes=(
            "Worn brake pads or rotors",
            "Engine sensor malfunctions",
            "Transmission problems",
            "Suspension wear and damage",
            "Battery or electrical issues",
        ),
        emergency_scenario="my car broke down and won't start",
        waiting_advice="Pull over safely and note any warning lights or sounds.",
    ),
    "cleaning": IndustryVocabulary(
        professionals="cleaning specialists",
        section_badge="✨ Cleaning Services",
        common_issue="dirty spaces, time constraints, or deep cleaning needs",
        common_service="residential and commercial cleaning",
        emergency_issue="urgent cleaning needs",
        hero_service="house cleaning, office cleaning, deep cleaning, and move-out cleaning",
        damage_type="cleaning challenges",
        service_features=(
            "Eco-friendly cleaning products",
            "Trained and insured staff",
        ),
        signs=(
            "Dust accumulation on surfaces",
            "Stained carpets or upholstery",
            "Cluttered and disorganized spaces",
            "Odors in the home or office",
            "Visible mold or mildew",
        ),
        causes=(
            "Busy schedule limiting cleaning time",
            "Moving in or out of a property",
            "Post-construction mess",
            "Seasonal deep cleaning needs",
            "Event preparation requirements",
        ),
        emergency_scenario="unexpected guests coming and the house is a mess",
        waiting_advice="Clear personal items from surfaces to speed up our cleaning process.",
    ),
    "pest": IndustryVocabulary(
        professionals="pest control experts",
        section_badge="🐜 Pest Control Services",
        common_issue="insect infestations, rodents, or termite damage",
        common_service="pest inspection and extermination",
        emergency_issue="urgent pest infestations",
        hero_service="pest extermination, termite treatment, and wildlife removal",
        damage_type="pest damage",
        service_features=(
            "Safe, family-friendly treatments",
            "Long-term prevention plans",
        ),
        signs=(
            "Droppings or urine stains",
            "Gnaw marks on wood or wires",
            "Strange sounds in walls or attic",
            "Visible insects or nests",
            "Damaged food packaging",
        ),
        causes=(
            "Entry points around home foundation",
            "Food sources attracting pests",
            "Moisture problems creating habitat",
            "Overgrown vegetation near the house",
            "Seasonal pest migration",
        ),
        emergency_scenario="discovered a major ant or rodent infestation",
        waiting_advice="Seal food containers and don't disturb nests before our arrival.",
    ),
    "moving": IndustryVocabulary(
        professionals="moving specialists",
        section_badge="📦 Moving Services",
        common_issue="relocating, packing, or furniture transport",
        common_service="residential and commercial moving",
        emergency_issue="last-minute moving needs",
        hero_service="local moving, long-distance moving, packing, and storage",
        damage_type="moving challenges",
        service_features=(
            "Fully insured moves",
            "Professional packing services",
        ),
        signs=(
            "Upcoming lease ending",
            "Purchased a new home",
            "Relocating for work",
            "Downsizing or upsizing",
            "Need temporary storage",
        ),
        causes=(
            "Job relocation requirements",
            "Family size changes",
            "Upgrading to a larger space",
            "Retirement and downsizing",
            "Investment property changes",
        ),
        emergency_scenario="need to move out quickly due to unexpected circumstances",
        waiting_advice="Start decluttering and create an inventory of items to move.",
    ),
    "pool": IndustryVocabulary(
        professionals="pool technicians",
        section_badge="🏊 Pool Services",
        common_issue="dirty water, equipment problems, or maintenance needs",
        common_service="pool cleaning and maintenance",
        emergency_issue="urgent pool repairs",
        hero_service="pool cleaning, equipment repair, and water balancing",
        damage_type="pool issues",
        service_features=(
            "Weekly maintenance plans",
            "Equipment installation",
        ),
        signs=(
            "Cloudy or green water",
            "Pump not running properly",
            "Pool heater not working",
            "Cracks in pool surface",
            "Filter pressure problems",
        ),
        causes=(
            "Improper chemical balance",
            "Clogged or dirty filters",
            "Pump motor failure",
            "Leak in pool structure",
            "Algae growth",
        ),
        emergency_scenario="pool turned green right before a party",
        waiting_advice="Keep the pump running and avoid adding chemicals until we arrive.",
    ),
    "spa": IndustryVocabulary(
        professionals="spa therapists",
        section_badge="💆 Spa & Wellness",
        common_issue="stress, tension, or wellness goals",
        common_service="massage and wellness treatments",
        emergency_issue="self-care needs",
        hero_service="massage therapy, facials, body treatments, and wellness packages",
        damage_type="wellness concerns",
        service_features=(
            "Licensed therapists",
            "Premium organic products",
        ),
        signs=(
            "Chronic muscle tension",
            "High stress levels",
            "Skin concerns",
            "Need for relaxation",
            "Special occasion pampering",
        ),
        causes=(
            "Desk job posture issues",
            "Athletic training recovery",
            "Wedding or event preparation",
            "General wellness maintenance",
            "Gift for a loved one",
        ),
        emergency_scenario="desperately need relaxation before an important event",
        waiting_advice="Let us know about any allergies or conditions before your appointment.",
    ),
    "remodeling": IndustryVocabulary(
        professionals="remodeling contractors",
        section_badge="🔨 Remodeling Services",
        common_issue="outdated spaces, functionality issues, or home improvements",
        common_service="home renovation and remodeling",
        emergency_issue="urgent renovation needs",
        hero_service="kitchen remodeling, bathroom renovation, and whole-home updates",
        damage_type="renovation challenges",
        service_features=(
            "Design-build approach",
            "Quality craftsmanship guarantee",
        ),
        signs=(
            "Outdated kitchen or bathroom",
            "Need more living space",
            "Poor room functionality",
            "Preparing home for sale",
            "Accessibility modifications needed",
        ),
        causes=(
            "Growing family needs",
            "Home aging and wear",
            "Energy efficiency updates",
            "Style and aesthetic changes",
            "Home value improvement",
        ),
        emergency_scenario="need to update our home quickly before listing it",
        waiting_advice="Create a wish list of features and gather inspiration photos.",
    ),
    "flooring": IndustryVocabulary(
        professionals="flooring specialists",
        section_badge="🏠 Flooring Services",
        common_issue="worn floors, installation needs, or flooring upgrades",
        common_service="floor installation and refinishing",
        emergency_issue="urgent flooring repairs",
        hero_service="hardwood, tile, carpet, and laminate flooring installation",
        damage_type="flooring issues",
        service_features=(
            "Wide material selection",
            "Expert installation",
        ),
        signs=(
            "Scratched or worn hardwood",
            "Stained or old carpet",
            "Cracked or loose tiles",
            "Water-damaged floors",
            "Squeaky or uneven surfaces",
        ),
        causes=(
            "Normal wear and aging",
            "Water or moisture damage",
            "Pet damage to floors",
            "Poor original installation",
            "Heavy furniture impact",
        ),
        emergency_scenario="water damage ruined our floors and we need replacement fast",
        waiting_advice="Measure your rooms and decide on your preferred flooring style.",
    ),
    "water-restoration": IndustryVocabulary(
        professionals="water restoration specialists",
        section_badge="💧 Water Restoration",
        common_issue="flooding, water damage, or burst pipes",
        common_service="water extraction and drying",
        emergency_issue="water damage emergencies",
        hero_service="water extraction, structural drying, and flood cleanup",
        damage_type="water damage",
        service_features=(
            "Industrial water extraction",
            "Advanced drying technology",
        ),
        signs=(
            "Standing water in your property",
            "Wet carpets or flooring",
            "Water stains on walls or ceilings",
            "Musty or damp odors",
            "Warped or buckled flooring",
        ),
        causes=(
            "Burst or frozen pipes",
            "Appliance malfunctions",
            "Heavy rain and flooding",
            "Roof leaks",
            "Sewage backups",
        ),
        emergency_scenario="our basement flooded after a pipe burst",
        waiting_advice="Turn off the water main and avoid electrical areas.",
    ),
    "fire-restoration": IndustryVocabulary(
        professionals="fire restoration experts",
        section_badge="🔥 Fire Restoration",
        common_issue="fire damage, smoke damage, or soot cleanup",
        common_service="fire damage restoration",
        emergency_issue="fire damage emergencies",
        hero_service="fire damage cleanup, smoke removal, and structural restoration",
        damage_type="fire damage",
        service_features=(
            "Smoke and soot removal",
            "Odor elimination technology",
        ),
        signs=(
            "Visible fire or smoke damage",
            "Strong smoke odors",
            "Soot deposits on surfaces",
            "Water damage from firefighting",
            "Structural weakening",
        ),
        causes=(
            "Kitchen fires",
            "Electrical malfunctions",
            "Heating equipment issues",
            "Candles and open flames",
            "Lightning strikes",
        ),
        emergency_scenario="a fire damaged our kitchen and living room",
        waiting_advice="Wait for fire department clearance before entering.",
    ),
    "mold-remediation": IndustryVocabulary(
        professionals="mold remediation specialists",
        section_badge="🦠 Mold Remediation",
        common_issue="mold growth, musty odors, or water damage",
        common_service="mold inspection and removal",
        emergency_issue="mold contamination",
        hero_service="mold testing, removal, and prevention",
        damage_type="mold damage",
        service_features=(
            "Professional mold testing",
            "Safe containment procedures",
        ),
        signs=(
            "Visible mold growth",
            "Musty or earthy odors",
            "Recent water damage",
            "Allergic reactions indoors",
            "Discoloration on walls or ceilings",
        ),
        causes=(
            "Water leaks and moisture",
            "Poor ventilation",
            "High humidity levels",
            "Flooding or water damage",
            "Condensation problems",
        ),
        emergency_scenario="discovered extensive mold in our basement",
        waiting_advice="Avoid disturbing the mold and improve ventilation if safe.",
    ),
    "garage-door": IndustryVocabulary(
        professionals="garage door technicians",
        section_badge="🚪 Garage Door Services",
        common_issue="broken springs, opener problems, or door alignment",
        common_service="garage door repair and installation",
        emergency_issue="garage door emergencies",
        hero_service="spring replacement, opener repair, and new installations",
        damage_type="garage door issues",
        service_features=(
            "Same-day service available",
            "Quality parts warranty",
        ),
        signs=(
            "Door won't open or close properly",
            "Loud grinding or squeaking noises",
            "Door moves unevenly",
            "Broken springs or cables",
            "Opener not responding",
        ),
        causes=(
            "Worn springs and cables",
            "Track misalignment",
            "Opener motor failure",
            "Sensor malfunctions",
            "Weather stripping damage",
        ),
        emergency_scenario="our garage door spring broke and the door won't open",
        waiting_advice="Do not attempt to force the door open or fix springs yourself.",
    ),
    "locksmith": IndustryVocabulary(
        professionals="locksmith specialists",
        section_badge="🔐 Locksmith Services",
        common_issue="lockouts, broken locks, or key problems",
        common_service="lock repair and key services",
        emergency_issue="lockout emergencies",
        hero_service="emergency lockouts, lock changes, and key duplication",
        damage_type="lock issues",
        service_features=(
            "24/7 emergency service",
            "Licensed and bonded",
        ),
        signs=(
            "Locked out of home or car",
            "Key stuck or broken in lock",
            "Lock won't turn properly",
            "Need locks rekeyed after moving",
            "Security upgrade needed",
        ),
        causes=(
            "Lost or stolen keys",
            "Worn lock mechanisms",
            "Break-in damage",
            "Moving to new property",
            "Outdated security systems",
        ),
        emergency_scenario="locked out of my house with no spare key",
        waiting_advice="Stay in a safe location and have ID ready for verification.",
    ),
    "personal-injury": IndustryVocabulary(
        professionals="personal injury attorneys",
        section_badge="⚖️ Personal Injury Law",
        common_issue="accidents, injuries, or insurance claims",
        common_service="personal injury representation",
        emergency_issue="injury cases",
        hero_service="car accidents, slip and fall, medical malpractice, and wrongful death",
        damage_type="injury claims",
        service_features=(
            "Free case evaluation",
            "No fee unless you win",
        ),
        signs=(
            "Injured in an accident",
            "Medical bills piling up",
            "Insurance company denying claim",
            "Unable to work due to injuries",
            "Need help with paperwork",
        ),
        causes=(
            "Car or truck accidents",
            "Slip and fall incidents",
            "Medical malpractice",
            "Workplace injuries",
            "Defective products",
        ),
        emergency_scenario="injured in a car accident and dealing with insurance",
        waiting_advice="Document everything and seek medical attention first.",
    ),
    "family-law": IndustryVocabulary(
        professionals="family law attorneys",
        section_badge="👨‍👩‍👧 Family Law",
        common_issue="divorce, custody, or family legal matters",
        common_service="family law representation",
        emergency_issue="family legal matters",
        hero_service="divorce, child custody, adoption, and prenuptial agreements",
        damage_type="family legal issues",
        service_features=(
            "Compassionate representation",
            "Confidential consultations",
        ),
        signs=(
            "Considering divorce or separation",
            "Custody disputes",
            "Adoption process",
            "Domestic violence concerns",
            "Child support issues",
        ),
        causes=(
            "Marriage dissolution",
            "Child custody disagreements",
            "Asset division needs",
            "Adoption requirements",
            "Protection order needs",
        ),
        emergency_scenario="going through a difficult divorce and custody battle",
        waiting_advice="Gather important documents and create a safe support network.",
    ),
    "dental": IndustryVocabulary(
        professionals="dental professionals",
        section_badge="🦷 Dental Services",
        common_issue="tooth pain, dental work, or cosmetic concerns",
        common_service="dental care and treatment",
        emergency_issue="dental emergencies",
        hero_service="general dentistry, cosmetic dentistry, and emergency care",
        damage_type="dental issues",
        service_features=(
            "State-of-the-art equipment",
            "Comfortable patient experience",
        ),
        signs=(
            "Tooth pain or sensitivity",
            "Bleeding or swollen gums",
            "Cracked or chipped teeth",
            "Bad breath concerns",
            "Discolored teeth",
        ),
        causes=(
            "Cavities and decay",
            "Gum disease",
            "Tooth trauma",
            "Poor dental hygiene",
            "Grinding or clenching",
        ),
        emergency_scenario="severe toothache that won't go away",
        waiting_advice="Apply a cold compress and avoid hot or cold foods.",
    ),
    "chiropractic": IndustryVocabulary(
        professionals="chiropractors",
        section_badge="🦴 Chiropractic Care",
        common_issue="back pain, neck pain, or spinal alignment",
        common_service="chiropractic adjustments and care",
        emergency_issue="pain relief needs",
        hero_service="spinal adjustments, pain management, and wellness care",
        damage_type="pain issues",
        service_features=(
            "Gentle adjustment techniques",
            "Comprehensive wellness plans",
        ),
        signs=(
            "Chronic back or neck pain",
            "Headaches and migraines",
            "Limited range of motion",
            "Poor posture",
            "Muscle tension and stiffness",
        ),
        causes=(
            "Poor posture habits",
            "Workplace ergonomics",
            "Sports injuries",
            "Car accident trauma",
            "Repetitive stress",
        ),
        emergency_scenario="severe back pain affecting my daily life",
        waiting_advice="Apply ice and avoid heavy lifting before your appointment.",
    ),
    "pest-control": IndustryVocabulary(
        professionals="pest control experts",
        section_badge="🐜 Pest Control Services",
        common_issue="insect infestations, rodents, or termite damage",
        common_service="pest inspection and extermination",
        emergency_issue="urgent pest infestations",
        hero_service="pest extermination, termite treatment, and wildlife removal",
        damage_type="pest damage",
        service_features=(
            "Safe, family-friendly treatments",
            "Long-term prevention plans",
        ),
        signs=(
            "Droppings or urine stains",
            "Gnaw marks on wood or wires",
            "Strange sounds in walls or attic",
            "Visible insects or nests",
            "Damaged food packaging",
        ),
        causes=(
            "Entry points around home foundation",
            "Food sources attracting pests",
            "Moisture problems creating habitat",
            "Overgrown vegetation near the house",
            "Seasonal pest migration",
        ),
        emergency_scenario="discovered a major ant or rodent infestation",
        waiting_advice="Seal food containers and don't disturb nests before our arrival.",
    ),
    "auto-repair": IndustryVocabulary(
        professionals="automotive technicians",
        section_badge="🚗 Auto Repair Services",
        common_issue="engine problems, brake issues, or maintenance needs",
        common_service="vehicle repair and maintenance",
        emergency_issue="urgent car repair needs",
        hero_service="engine repair, brake service, oil changes, and diagnostics",
        damage_type="automotive issues",
        service_features=(
            "State-of-the-art diagnostics",
            "Factory-trained technicians",
        ),
        signs=(
            "Check engine light is on",
            "Strange noises when braking",
            "Vehicle pulling to one side",
            "Engine running rough or stalling",
            "Unusual smells from the car",
        ),
        causes=(
            "Worn brake pads or rotors",
            "Engine sensor malfunctions",
            "Transmission problems",
            "Suspension wear and damage",
            "Battery or electrical issues",
        ),
        emergency_scenario="my car broke down and won't start",
        waiting_advice="Pull over safely and note any warning lights or sounds.",
    ),
    "real-estate": IndustryVocabulary(
        professionals="real estate agents",
        section_badge="🏡 Real Estate Services",
        common_issue="buying, selling, or finding the perfect property",
        common_service="property buying and selling assistance",
        emergency_issue="time-sensitive property needs",
        hero_service="home buying, selling, property valuation, and market analysis",
        damage_type="real estate challenges",
        service_features=(
            "Local market expertise",
            "Negotiation specialists",
        ),
        signs=(
            "Ready to sell but unsure of home value",
            "Struggling to find the right property",
            "Need help navigating the buying process",
            "Relocating and need local guidance",
            "Investment property opportunities",
        ),
        causes=(
            "Changing market conditions",
            "First-time buyer uncertainty",
            "Complex negotiation situations",
            "Property inspection concerns",
            "Financing and mortgage questions",
        ),
        emergency_scenario="found our dream home and need to act fast",
        waiting_advice="Have your pre-approval ready and know your must-have features.",
    ),
    "ac-repair": IndustryVocabulary(
        professionals="AC technicians",
        section_badge="❄️ AC Repair Services",
        common_issue="AC not cooling, strange noises, or high energy bills",
        common_service="AC repair and maintenance",
        emergency_issue="AC breakdown emergencies",
        hero_service="AC repair, refrigerant recharge, and system tune-ups",
        damage_type="AC system issues",
        service_features=(
            "Same-day emergency service",
            "All brands serviced",
        ),
        signs=(
            "AC blowing warm air",
            "Unusual sounds from the unit",
            "Water leaking from AC",
            "Weak airflow from vents",
            "Frequent cycling on and off",
        ),
        causes=(
            "Low refrigerant levels",
            "Dirty air filters",
            "Frozen evaporator coils",
            "Faulty thermostat",
            "Electrical component failure",
        ),
        emergency_scenario="our AC stopped working during a heat wave",
        waiting_advice="Turn off the AC and check your thermostat and breaker.",
    ),
    "heating-repair": IndustryVocabulary(
        professionals="heating technicians",
        section_badge="🔥 Heating Repair Services",
        common_issue="furnace not heating, pilot light issues, or cold zones",
        common_service="furnace repair and heating services",
        emergency_issue="heating emergencies",
        hero_service="furnace repair, heat pump service, and boiler maintenance",
        damage_type="heating system issues",
        service_features=(
            "24/7 emergency heating service",
            "All heating systems serviced",
        ),
        signs=(
            "No heat coming from vents",
            "Pilot light keeps going out",
            "Strange odors from furnace",
            "Thermostat not responding",
            "Unusual furnace noises",
        ),
        causes=(
            "Ignition or pilot problems",
            "Dirty or clogged filters",
            "Wear and tear on components",
            "Thermostat malfunction",
            "Gas supply issues",
        ),
        emergency_scenario="our furnace stopped working in freezing weather",
        waiting_advice="Use space heaters safely and check thermostat batteries.",
    ),
    "air-duct-cleaning": IndustryVocabulary(
        professionals="duct cleaning specialists",
        section_badge="💨 Air Duct Cleaning",
        common_issue="dusty air, musty smells, or poor air quality",
        common_service="air duct cleaning and sanitization",
        emergency_issue="indoor air quality concerns",
        hero_service="duct cleaning, dryer vent cleaning, and air quality testing",
        damage_type="indoor air quality issues",
        service_features=(
            "Complete duct system cleaning",
            "HEPA filtration equipment",
        ),
        signs=(
            "Excessive dust in the home",
            "Musty or stale odors",
            "Allergy symptoms indoors",
            "Visible dust around vents",
            "Inconsistent airflow",
        ),
        causes=(
            "Years of dust accumulation",
            "Pet dander and hair",
            "Construction or renovation debris",
            "Mold growth in ducts",
            "Pest infestations in ductwork",
        ),
        emergency_scenario="musty smell coming from our vents after water damage",
        waiting_advice="Change your air filter and note any visible mold.",
    ),
    "insulation": IndustryVocabulary(
        professionals="insulation experts",
        section_badge="🏠 Insulation Services",
        common_issue="high energy bills, drafty rooms, or temperature fluctuations",
        common_service="insulation installation and upgrades",
        emergency_issue="energy efficiency concerns",
        hero_service="attic insulation, wall insulation, and spray foam installation",
        damage_type="insulation issues",
        service_features=(
            "Energy efficiency audits",
            "Multiple insulation options",
        ),
        signs=(
            "High heating or cooling bills",
            "Drafty rooms",
            "Uneven temperatures between rooms",
            "Ice dams on roof",
            "HVAC running constantly",
        ),
        causes=(
            "Inadequate original insulation",
            "Aged or compressed insulation",
            "Water damage to insulation",
            "Air leaks around the home",
            "Missing insulation in key areas",
        ),
        emergency_scenario="discovered our attic has almost no insulation",
        waiting_advice="Note which rooms feel drafty or have temperature issues.",
    ),
    "solar-panel": IndustryVocabulary(
        professionals="solar installation experts",
        section_badge="☀️ Solar Panel Services",
        common_issue="high electric bills, want clean energy, or solar questions",
        common_service="solar panel installation and maintenance",
        emergency_issue="solar system issues",
        hero_service="solar installation, panel cleaning, and system monitoring",
        damage_type="solar system concerns",
        service_features=(
            "Free solar assessment",
            "Financing options available",
        ),
        signs=(
            "High monthly electricity bills",
            "Interest in renewable energy",
            "South-facing roof with good sun exposure",
            "Want energy independence",
            "Looking for tax incentives",
        ),
        causes=(
            "Rising electricity costs",
            "Environmental concerns",
            "Desire for energy independence",
            "Available tax credits and rebates",
            "Home value improvement goals",
        ),
        emergency_scenario="solar panels stopped producing power",
        waiting_advice="Check your inverter for error codes and note production levels.",
    ),
    "drain-cleaning": IndustryVocabulary(
        professionals="drain cleaning specialists",
        section_badge="🚿 Drain Cleaning",
        common_issue="slow drains, clogs, or sewage smells",
        common_service="drain cleaning and sewer services",
        emergency_issue="drain emergencies",
        hero_service="drain cleaning, sewer line clearing, and hydro jetting",
        damage_type="drain problems",
        service_features=(
            "Video camera inspection",
            "High-pressure hydro jetting",
        ),
        signs=(
            "Slow draining fixtures",
            "Gurgling sounds from drains",
            "Sewage odors",
            "Water backing up in fixtures",
            "Multiple clogged drains",
        ),
        causes=(
            "Hair and soap buildup",
            "Grease and food particles",
            "Tree root intrusion",
            "Foreign object blockage",
            "Pipe scale and corrosion",
        ),
        emergency_scenario="sewage is backing up into our home",
        waiting_advice="Stop using water fixtures and avoid flushing toilets.",
    ),
    "water-heater": IndustryVocabulary(
        professionals="water heater specialists",
        section_badge="🔥 Water Heater Services",
        common_issue="no hot water, leaking tank, or strange noises",
        common_service="water heater repair and installation",
        emergency_issue="water heater emergencies",
        hero_service="water heater repair, replacement, and tankless installation",
        damage_type="water heater problems",
        service_features=(
            "Same-day installation available",
            "All brands and types serviced",
        ),
        signs=(
            "No hot water",
            "Rusty or discolored water",
            "Strange noises from tank",
            "Water leaking around unit",
            "Inconsistent water temperature",
        ),
        causes=(
            "Failing heating element",
            "Sediment buildup in tank",
            "Thermostat malfunction",
            "Tank corrosion",
            "Pressure relief valve issues",
        ),
        emergency_scenario="our water heater is leaking and making loud noises",
        waiting_advice="Turn off power to the unit and shut off the water supply.",
    ),
    "septic": IndustryVocabulary(
        professionals="septic system specialists",
        section_badge="🏠 Septic Services",
        common_issue="septic backup, odors, or system maintenance needs",
        common_service="septic pumping and maintenance",
        emergency_issue="septic emergencies",
        hero_service="septic pumping, inspection, and system repair",
        damage_type="septic system issues",
        service_features=(
            "Complete system inspections",
            "Preventive maintenance plans",
        ),
        signs=(
            "Slow drains throughout the home",
            "Sewage odors in yard",
            "Lush green grass over septic area",
            "Standing water near tank",
            "Toilets backing up",
        ),
        causes=(
            "Tank needs pumping",
            "Drain field failure",
            "Tree root damage",
            "Broken pipes or baffles",
            "System overload",
        ),
        emergency_scenario="sewage is backing up into our home",
        waiting_advice="Reduce water usage and avoid flushing until we arrive.",
    ),
    "leak-detection": IndustryVocabulary(
        professionals="leak detection specialists",
        section_badge="💧 Leak Detection",
        common_issue="hidden leaks, high water bills, or water damage",
        common_service="leak detection and repair",
        emergency_issue="urgent leak situations",
        hero_service="electronic leak detection, slab leak repair, and pipe location",
        damage_type="water leak issues",
        service_features=(
            "Non-invasive detection technology",
            "Accurate leak location",
        ),
        signs=(
            "Unexplained high water bills",
            "Sound of running water when nothing is on",
            "Wet spots on floors or walls",
            "Mold or mildew growth",
            "Dropping water pressure",
        ),
        causes=(
            "Corroded or aging pipes",
            "Shifting foundation",
            "Joint failures",
            "Tree root damage",
            "High water pressure",
        ),
        emergency_scenario="water bill tripled and we cant find the leak",
        waiting_advice="Check your water meter for signs of continuous running.",
    ),
    "electrician": IndustryVocabulary(
        professionals="licensed electricians",
        section_badge="⚡ Electrician Services",
        common_issue="electrical repairs, upgrades, or safety concerns",
        common_service="electrical installation and repair",
        emergency_issue="electrical emergencies",
        hero_service="panel upgrades, outlet installation, and wiring repair",
        damage_type="electrical problems",
        service_features=(
            "Licensed and insured",
            "Code-compliant work",
        ),
        signs=(
            "Flickering lights",
            "Tripping breakers",
            "Outlets not working",
            "Burning smell from outlets",
            "Outdated electrical panel",
        ),
        causes=(
            "Aging wiring",
            "Overloaded circuits",
            "Faulty connections",
            "Outdated components",
            "DIY electrical work",
        ),
        emergency_scenario="outlets are sparking and smell like burning",
        waiting_advice="Turn off power at the main breaker immediately.",
    ),
    "generator": IndustryVocabulary(
        professionals="generator technicians",
        section_badge="⚡ Generator Services",
        common_issue="power outages, backup power needs, or generator maintenance",
        common_service="generator installation and service",
        emergency_issue="power backup needs",
        hero_service="standby generator installation, maintenance, and repair",
        damage_type="power reliability issues",
        service_features=(
            "Automatic transfer switches",
            "Regular maintenance plans",
        ),
        signs=(
            "Frequent power outages in your area",
            "Home medical equipment needs",
            "Work-from-home requirements",
            "Sump pump protection needed",
            "Desire for power independence",
        ),
        causes=(
            "Storm-related outages",
            "Grid reliability issues",
            "Rural or remote location",
            "Critical power needs",
            "Home value improvement",
        ),
        emergency_scenario="need backup power for medical equipment",
        waiting_advice="Determine your essential circuits and power needs.",
    ),
    "general-contractor": IndustryVocabulary(
        professionals="general contractors",
        section_badge="🏗️ General Contracting",
        common_issue="home construction, major renovations, or project management",
        common_service="construction and renovation services",
        emergency_issue="construction project needs",
        hero_service="new construction, additions, and whole-home renovations",
        damage_type="construction challenges",
        service_features=(
            "Project management included",
            "Licensed and bonded",
        ),
        signs=(
            "Planning a major renovation",
            "Building a home addition",
            "Need multiple trades coordinated",
            "Commercial buildout needed",
            "Storm damage reconstruction",
        ),
        causes=(
            "Growing family needs",
            "Home aging and updates",
            "Property improvements",
            "Storm or fire damage",
            "Investment property development",
        ),
        emergency_scenario="need to coordinate multiple contractors for a renovation",
        waiting_advice="Gather ideas, set a budget, and define your project scope.",
    ),
    "bathroom-remodeling": IndustryVocabulary(
        professionals="bathroom remodeling experts",
        section_badge="🚿 Bathroom Remodeling",
        common_issue="outdated bathroom, functionality issues, or accessibility needs",
        common_service="bathroom renovation and remodeling",
        emergency_issue="bathroom upgrade needs",
        hero_service="complete bathroom renovations, tile work, and fixture installation",
        damage_type="bathroom renovation needs",
        service_features=(
            "Design services included",
            "Premium fixture options",
        ),
        signs=(
            "Outdated fixtures and finishes",
            "Lack of storage space",
            "Poor layout or functionality",
            "Water damage issues",
            "Accessibility needs",
        ),
        causes=(
            "Aging bathroom components",
            "Changing family needs",
            "Want to increase home value",
            "Energy efficiency improvements",
            "Style and aesthetic updates",
        ),
        emergency_scenario="bathroom has water damage and needs complete renovation",
        waiting_advice="Gather inspiration photos and list your must-have features.",
    ),
    "kitchen-remodeling": IndustryVocabulary(
        professionals="kitchen remodeling experts",
        section_badge="🍳 Kitchen Remodeling",
        common_issue="outdated kitchen, poor layout, or storage problems",
        common_service="kitchen renovation and remodeling",
        emergency_issue="kitchen upgrade needs",
        hero_service="complete kitchen renovations, cabinet installation, and countertops",
        damage_type="kitchen renovation needs",
        service_features=(
            "Custom cabinet solutions",
            "3D design visualization",
        ),
        signs=(
            "Outdated cabinets and appliances",
            "Insufficient counter space",
            "Poor kitchen layout",
            "Lack of storage",
            "Worn or damaged surfaces",
        ),
        causes=(
            "Kitchen aging over time",
            "Growing cooking needs",
            "Want to increase home value",
            "Energy efficiency goals",
            "Lifestyle and entertaining needs",
        ),
        emergency_scenario="kitchen cabinets are falling apart and counters are damaged",
        waiting_advice="Create a wish list and determine your budget range.",
    ),
    "painting": IndustryVocabulary(
        professionals="professional painters",
        section_badge="🎨 Painting Services",
        common_issue="faded paint, wall damage, or color updates needed",
        common_service="interior and exterior painting",
        emergency_issue="painting needs",
        hero_service="house painting, cabinet painting, and pressure washing",
        damage_type="painting needs",
        service_features=(
            "Premium paint brands",
            "Color consultation available",
        ),
        signs=(
            "Fading or peeling paint",
            "Cracks in the finish",
            "Outdated colors",
            "Wall damage or repairs needed",
            "Selling or staging home",
        ),
        causes=(
            "Sun and weather exposure",
            "Normal wear and aging",
            "Moisture problems",
            "Prior poor quality work",
            "Changing style preferences",
        ),
        emergency_scenario="need the house painted before we sell it",
        waiting_advice="Choose your color palette and clear furniture from walls.",
    ),
    "carpet-cleaning": IndustryVocabulary(
        professionals="carpet cleaning specialists",
        section_badge="🧹 Carpet Cleaning",
        common_issue="stained carpets, odors, or allergens",
        common_service="carpet and upholstery cleaning",
        emergency_issue="urgent carpet cleaning needs",
        hero_service="deep carpet cleaning, stain removal, and upholstery cleaning",
        damage_type="carpet conditions",
        service_features=(
            "Hot water extraction",
            "Pet odor treatment",
        ),
        signs=(
            "Visible stains on carpet",
            "Odors from carpets",
            "Allergy symptoms at home",
            "Matted or worn carpet",
            "Pet accidents",
        ),
        causes=(
            "Spills and accidents",
            "Pet urine and odors",
            "High foot traffic",
            "Dust and allergens",
            "General aging",
        ),
        emergency_scenario="major spill stained our living room carpet",
        waiting_advice="Blot (dont rub) spills and vacuum before our arrival.",
    ),
    "pressure-washing": IndustryVocabulary(
        professionals="pressure washing experts",
        section_badge="💦 Pressure Washing",
        common_issue="dirty siding, stained driveways, or mold on surfaces",
        common_service="pressure washing and soft washing",
        emergency_issue="exterior cleaning needs",
        hero_service="house washing, driveway cleaning, and deck restoration",
        damage_type="exterior cleaning needs",
        service_features=(
            "Safe for all surfaces",
            "Eco-friendly cleaning solutions",
        ),
        signs=(
            "Green algae on siding",
            "Black stains on concrete",
            "Mold on deck or patio",
            "Dirty gutters and fascia",
            "Preparing for painting",
        ),
        causes=(
            "Weather and moisture",
            "Shade and lack of sun",
            "Years of buildup",
            "Tree sap and debris",
            "Normal environmental exposure",
        ),
        emergency_scenario="need the house cleaned before a party",
        waiting_advice="Close all windows and move outdoor furniture.",
    ),
    "handyman": IndustryVocabulary(
        professionals="handyman professionals",
        section_badge="🔧 Handyman Services",
        common_issue="minor repairs, installations, or home maintenance",
        common_service="handyman repairs and installations",
        emergency_issue="home repair needs",
        hero_service="repairs, installations, assembly, and general maintenance",
        damage_type="home repair needs",
        service_features=(
            "One call for all repairs",
            "Experienced in many trades",
        ),
        signs=(
            "List of small repairs piling up",
            "Items needing installation",
            "Furniture needing assembly",
            "Door or window adjustments",
            "General home maintenance needs",
        ),
        causes=(
            "Normal home wear and tear",
            "Lack of time for DIY",
            "Moving into a new home",
            "Preparing home for sale",
            "Seasonal maintenance needs",
        ),
        emergency_scenario="have a long list of repairs before family visits",
        waiting_advice="Make a list of all needed repairs with priorities.",
    ),
    "tree-service": IndustryVocabulary(
        professionals="tree service specialists",
        section_badge="🌳 Tree Services",
        common_issue="overgrown trees, dead branches, or tree removal needs",
        common_service="tree trimming and removal",
        emergency_issue="urgent tree problems",
        hero_service="tree trimming, removal, stump grinding, and emergency service",
        damage_type="tree-related issues",
        service_features=(
            "Fully insured climbers",
            "Complete debris removal",
        ),
        signs=(
            "Dead or hanging branches",
            "Trees too close to house",
            "Storm-damaged trees",
            "Overgrown or blocking views",
            "Diseased or dying trees",
        ),
        causes=(
            "Storm damage",
            "Disease or pest infestation",
            "Overgrowth and neglect",
            "Trees planted too close to structures",
            "Age and natural decline",
        ),
        emergency_scenario="storm knocked a large branch onto our roof",
        waiting_advice="Stay away from the damaged area until we assess safety.",
    ),
    "fence": IndustryVocabulary(
        professionals="fence installation experts",
        section_badge="🏡 Fence Services",
        common_issue="fence damage, privacy needs, or property boundaries",
        common_service="fence installation and repair",
        emergency_issue="fence repair needs",
        hero_service="wood fence, vinyl fence, and chain link installation",
        damage_type="fence problems",
        service_features=(
            "Free estimates",
            "Various material options",
        ),
        signs=(
            "Leaning or falling fence sections",
            "Rotting or damaged posts",
            "Privacy concerns",
            "Pet containment needs",
            "Property line definition",
        ),
        causes=(
            "Weather damage",
            "Age and deterioration",
            "Storm or wind damage",
            "Pest or rot damage",
            "Poor original installation",
        ),
        emergency_scenario="fence blew down and our dogs can get out",
        waiting_advice="Temporarily secure pets and measure the damaged area.",
    ),
    "windows": IndustryVocabulary(
        professionals="window installation experts",
        section_badge="🪟 Window Services",
        common_issue="drafty windows, broken glass, or energy inefficiency",
        common_service="window replacement and repair",
        emergency_issue="window repair needs",
        hero_service="window replacement, glass repair, and energy-efficient upgrades",
        damage_type="window problems",
        service_features=(
            "Energy-efficient options",
            "Professional installation",
        ),
        signs=(
            "Drafts around windows",
            "Condensation between panes",
            "Difficult to open or close",
            "High energy bills",
            "Visible cracks or damage",
        ),
        causes=(
            "Aging window seals",
            "Storm or impact damage",
            "Settling of the home",
            "Poor original installation",
            "Normal wear and tear",
        ),
        emergency_scenario="window broke and we need it secured fast",
        waiting_advice="Board up the opening temporarily if possible.",
    ),
    "doors": IndustryVocabulary(
        professionals="door installation specialists",
        section_badge="🚪 Door Services",
        common_issue="damaged doors, security concerns, or upgrade needs",
        common_service="door installation and repair",
        emergency_issue="door repair needs",
        hero_service="entry door installation, interior doors, and hardware replacement",
        damage_type="door problems",
        service_features=(
            "Wide selection available",
            "Security-focused installation",
        ),
        signs=(
            "Doors sticking or not closing",
            "Visible damage or wear",
            "Drafts around door frames",
            "Security concerns",
            "Outdated appearance",
        ),
        causes=(
            "House settling",
            "Weather damage",
            "Normal wear and tear",
            "Break-in damage",
            "Poor original installation",
        ),
        emergency_scenario="front door wont lock properly",
        waiting_advice="Photograph the issue and secure with a temporary measure.",
    ),
    "gutters": IndustryVocabulary(
        professionals="gutter installation experts",
        section_badge="🏠 Gutter Services",
        common_issue="clogged gutters, leaking seams, or improper drainage",
        common_service="gutter installation and repair",
        emergency_issue="gutter problems",
        hero_service="gutter installation, cleaning, and gutter guard installation",
        damage_type="gutter issues",
        service_features=(
            "Seamless gutter options",
            "Gutter protection systems",
        ),
        signs=(
            "Water overflowing from gutters",
            "Sagging or pulling away from house",
            "Water pooling at foundation",
            "Visible rust or damage",
            "Landscaping erosion",
        ),
        causes=(
            "Debris buildup and clogs",
            "Age and corrosion",
            "Improper slope",
            "Heavy ice or snow",
            "Birds or pests nesting",
        ),
        emergency_scenario="gutters overflowing and water is getting in basement",
        waiting_advice="Clear visible debris if safely accessible.",
    ),
    "fitness": IndustryVocabulary(
        professionals="fitness professionals",
        section_badge="💪 Fitness Services",
        common_issue="health goals, training needs, or gym membership",
        common_service="personal training and fitness programs",
        emergency_issue="fitness goals",
        hero_service="personal training, group classes, and nutrition coaching",
        damage_type="fitness challenges",
        service_features=(
            "Certified personal trainers",
            "Customized workout plans",
        ),
        signs=(
            "Ready to get in shape",
            "Need motivation and accountability",
            "Want to build strength",
            "Looking to lose weight",
            "Training for an event",
        ),
        causes=(
            "Sedentary lifestyle",
            "Weight management goals",
            "Health improvement needs",
            "Athletic performance goals",
            "Stress relief and wellness",
        ),
        emergency_scenario="need to get in shape for an upcoming wedding",
        waiting_advice="Consider your fitness goals and any health limitations.",
    ),
    "salon": IndustryVocabulary(
        professionals="beauty professionals",
        section_badge="💇 Salon Services",
        common_issue="hair care, styling, or beauty treatments",
        common_service="hair styling and beauty services",
        emergency_issue="beauty service needs",
        hero_service="haircuts, coloring, styling, and beauty treatments",
        damage_type="beauty service needs",
        service_features=(
            "Experienced stylists",
            "Premium products used",
        ),
        signs=(
            "Need a new hairstyle",
            "Color touch-up needed",
            "Special event coming up",
            "Damaged hair needing treatment",
            "Time for regular maintenance",
        ),
        causes=(
            "Regular beauty maintenance",
            "Style change desired",
            "Special occasion preparation",
            "Hair damage repair",
            "Self-care and pampering",
        ),
        emergency_scenario="need hair done urgently for a wedding",
        waiting_advice="Gather inspiration photos of styles you like.",
    ),
    "photography": IndustryVocabulary(
        professionals="professional photographers",
        section_badge="📸 Photography Services",
        common_issue="event coverage, portraits, or commercial photography",
        common_service="professional photography",
        emergency_issue="photography needs",
        hero_service="event photography, portraits, and commercial photography",
        damage_type="photography needs",
        service_features=(
            "Professional editing included",
            "Various package options",
        ),
        signs=(
            "Wedding or event coming up",
            "Need professional headshots",
            "Family portrait session",
            "Product photography needed",
            "Real estate photography",
        ),
        causes=(
            "Special life events",
            "Business branding needs",
            "Capturing memories",
            "Professional image needs",
            "Marketing content creation",
        ),
        emergency_scenario="photographer cancelled and our wedding is next week",
        waiting_advice="List your must-have shots and preferred style.",
    ),
    "technology": IndustryVocabulary(
        professionals="IT professionals",
        section_badge="💻 Technology Services",
        common_issue="computer problems, network issues, or tech support",
        common_service="IT support and services",
        emergency_issue="tech emergencies",
        hero_service="computer repair, network setup, and IT support",
        damage_type="technology issues",
        service_features=(
            "Remote support available",
            "Business and home services",
        ),
        signs=(
            "Computer running slow",
            "Network connectivity issues",
            "Virus or malware concerns",
            "Need help with new setup",
            "Data recovery needed",
        ),
        causes=(
            "Malware or virus infection",
            "Outdated software/hardware",
            "User error or accidents",
            "Hardware failure",
            "Configuration issues",
        ),
        emergency_scenario="computer crashed and I have important work files",
        waiting_advice="Do not restart repeatedly and note error messages.",
    ),
    "veterinary": IndustryVocabulary(
        professionals="veterinary professionals",
        section_badge="🐾 Veterinary Services",
        common_issue="pet health, checkups, or emergency care",
        common_service="veterinary care and treatment",
        emergency_issue="pet health emergencies",
        hero_service="wellness exams, vaccinations, and pet surgery",
        damage_type="pet health concerns",
        service_features=(
            "Compassionate care",
            "State-of-the-art equipment",
        ),
        signs=(
            "Pet not eating or drinking",
            "Changes in behavior",
            "Limping or mobility issues",
            "Skin or coat problems",
            "Time for annual checkup",
        ),
        causes=(
            "Normal aging process",
            "Dietary issues",
            "Injuries or accidents",
            "Infectious diseases",
            "Hereditary conditions",
        ),
        emergency_scenario="my pet is injured and needs immediate help",
        waiting_advice="Keep your pet calm and prevent movement if injured.",
    ),
    "restaurant": IndustryVocabulary(
        professionals="culinary professionals",
        section_badge="🍽️ Restaurant Services",
        common_issue="dining reservations, catering, or food ordering",
        common_service="dining and catering services",
        emergency_issue="dining needs",
        hero_service="dine-in service, takeout, and event catering",
        damage_type="dining needs",
        service_features=(
            "Fresh, quality ingredients",
            "Private event options",
        ),
        signs=(
            "Planning a special dinner",
            "Need catering for an event",
            "Looking for takeout options",
            "Hosting a celebration",
            "Business meal needs",
        ),
        causes=(
            "Special occasion celebration",
            "Event catering needs",
            "Convenience and time-saving",
            "Quality dining experience",
            "Meeting and gathering place",
        ),
        emergency_scenario="need last-minute catering for an important event",
        waiting_advice="Know your guest count and any dietary restrictions.",
    ),
}

SCHEMA_TYPES: dict[str, str] = {
    "water-restoration": "HomeAndConstructionBusiness",
    "fire-restoration": "HomeAndConstructionBusiness",
    "mold-remediation": "HomeAndConstructionBusiness",
    "pest-control": "HomeAndConstructionBusiness",
    "garage-door": "HomeAndConstructionBusiness",
    "plumbing": "Plumber",
    "hvac": "HVACBusiness",
    "roofing": "RoofingContractor",
    "electrical": "Electrician",
    "landscaping": "LandscapingBusiness",
    "cleaning": "HousekeepingService",
    "locksmith": "Locksmith",
    "personal-injury": "Attorney",
    "family-law": "Attorney",
    "dental": "Dentist",
    "chiropractic": "Chiropractor",
    "auto-repair": "AutoRepair",
    "real-estate": "RealEstateAgent",
}
DEFAULT_SCHEMA_TYPE = "LocalBusiness"


def get_vocabulary(industry: str | None) -> IndustryVocabulary:
    """Return the vocabulary for ``industry`` or ``DEFAULT_VOCABULARY``."""
    return INDUSTRY_VOCABULARY.get((industry or "").strip().lower(), DEFAULT_VOCABULARY)


def schema_type_for(industry: str | None) -> str:
    """Return the schema.org ``@type`` used for a business in ``industry``."""
    return SCHEMA_TYPES.get((industry or "").strip().lower(), DEFAULT_SCHEMA_TYPE)


__all__ = [
    "DEFAULT_SCHEMA_TYPE",
    "DEFAULT_VOCABULARY",
    "INDUSTRY_VOCABULARY",
    "IndustryVocabulary",
    "get_vocabulary",
    "schema_type_for",
]
