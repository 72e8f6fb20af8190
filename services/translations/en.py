# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Buttons
    "button.back": "Back",
    "button.continue": "Continue",
    "button.close": "Close",

    # Storefront window
    "storefront.title": "Liberator Medical Supply",
    "storefront.subtitle": "Quality medical supplies delivered discreetly to your door.",
    "storefront.get_samples": "Get Free Samples",
    "storefront.find_supplies": "Find My Supplies",
    "storefront.support": "Questions? Call us at {phone}",

    # Wizard chrome
    "wizard.progress.step": "Step {current} of {total}",
    "wizard.progress.percent": "{percent}% complete",

    # Validation - contact fields
    "validation.name_required": "Name is required",
    "validation.email_required": "Email is required",
    "validation.email_invalid": "Please enter a valid email",
    "validation.phone_required": "Phone is required",
    "validation.phone_invalid": "Please enter a valid 10-digit phone number",
    "validation.zip_required": "ZIP code is required",
    "validation.zip_invalid": "Please enter a valid 5-digit ZIP code",

    # Validation - selections
    "validation.products_or_assortment": "Please select at least one product or choose 'Send me an assortment'",
    "validation.insurance_type_required": "Please select your insurance type",
    "validation.product_interest_required": "Please select at least one product",
    "validation.option_required": "Please select an option",

    # Contact step (shared labels)
    "contact.full_name": "Full Name",
    "contact.full_name.placeholder": "John Smith",
    "contact.email": "Email Address",
    "contact.email.placeholder": "john@example.com",
    "contact.phone": "Phone Number",
    "contact.phone.placeholder": "(555) 123-4567",
    "contact.zip_code": "ZIP Code",
    "contact.zip_code.placeholder": "12345",

    # Sample request wizard
    "sample_request.title": "Get Free Samples",
    "sample_request.title.submitted": "Samples On the Way!",
    "sample_request.button.submit": "Request Samples",
    "sample_request.contact.title": "Where should we send your samples?",
    "sample_request.contact.description": "We'll use this to ship your free samples and follow up with helpful tips.",
    "sample_request.products.title": "Which samples would you like?",
    "sample_request.products.description": "Select the products you'd like to try, or let us send you an assortment.",
    "sample_request.products.assortment": "Send me an assortment",
    "sample_request.products.assortment.hint": "Not sure what you need? We'll send a variety of our most popular samples.",
    "sample_request.products.specific": "Or select specific products:",
    "sample_request.insurance.title": "Insurance Information",
    "sample_request.insurance.description": "This is optional, but helps us check if your supplies may be covered.",
    "sample_request.insurance.provider": "Insurance Provider",
    "sample_request.insurance.provider.placeholder": "Select your provider (optional)",
    "sample_request.insurance.member_id": "Member ID (Optional)",
    "sample_request.insurance.member_id.placeholder": "Enter your member ID",
    "sample_request.insurance.member_id.hint": "Found on your insurance card",
    "sample_request.insurance.skip_note": "Skip this step? No problem! You can still receive free samples. Our team can help verify your insurance coverage later.",
    "sample_request.confirmation.title": "Your Samples Are On the Way!",
    "sample_request.confirmation.description": "We're preparing your free samples for shipment.",
    "sample_request.confirmation.delivery": "Expected Delivery",
    "sample_request.confirmation.delivery.value": "5-7 business days",
    "sample_request.confirmation.email": "Confirmation Email",
    "sample_request.confirmation.email.value": "Sent to {email}",
    "sample_request.confirmation.next": "What's Next:",
    "sample_request.confirmation.next.email": "Check your email for order confirmation and tracking info",
    "sample_request.confirmation.next.try": "Try your samples and see what works best for you",
    "sample_request.confirmation.next.call": "Call us at {phone} to place your regular order",

    # Supply finder wizard
    "supply_finder.title": "Find My Supplies",
    "supply_finder.title.submitted": "You're All Set!",
    "supply_finder.button.submit": "Get My Free Samples",
    "supply_finder.insurance.title": "What type of insurance do you have?",
    "supply_finder.insurance.description": "This helps us determine your coverage and potential savings.",
    "supply_finder.products.title": "What products are you interested in?",
    "supply_finder.products.description": "Select all that apply. We'll help you find the right supplies.",
    "supply_finder.doctor.title": "Do you have a prescribing doctor?",
    "supply_finder.doctor.description": "A prescription is required for most medical supplies. Don't worry if you don't have one yet!",
    "supply_finder.doctor.no_hint": "No problem! We can help connect you with a healthcare provider.",
    "supply_finder.contact.title": "Almost there! How can we reach you?",
    "supply_finder.contact.description": "We'll use this information to send you free samples and follow up on your order.",
    "supply_finder.contact.resources": "Yes, I'd like to receive educational resources and product tips",
    "supply_finder.confirmation.title": "You're All Set!",
    "supply_finder.confirmation.description": "Our team will handle the rest. Here's what happens next:",
    "supply_finder.confirmation.step1.title": "Confirmation Email",
    "supply_finder.confirmation.step1.description": "Check your inbox for a confirmation email with your request details.",
    "supply_finder.confirmation.step2.title": "Insurance Verification",
    "supply_finder.confirmation.step2.description": "Our team will verify your insurance coverage within 24-48 hours.",
    "supply_finder.confirmation.step3.title": "Free Samples Shipped",
    "supply_finder.confirmation.step3.description": "Your free samples will be shipped directly to your door.",
}
